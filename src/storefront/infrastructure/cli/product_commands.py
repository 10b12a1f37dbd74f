"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.output import admin_context, api, emit, token_option


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
@token_option
def product_add(name: str, price: str, stock: int, token: str | None) -> None:
    """Add a new product to the catalog (admin)."""
    emit(
        api().add_product(
            admin_context(token), {"name": name, "price": price, "stock": stock}
        )
    )


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products in the catalog."""
    repo = bootstrap.product_repository(ctx.find_root().meta["settings"])
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'Stock':>7}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>12} {p.stock:>7}")
