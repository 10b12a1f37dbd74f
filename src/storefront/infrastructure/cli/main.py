import click

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.infrastructure.cli.shipping_commands import shipping_quote
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_setup import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront — checkout and order back-office"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(settings.log_level)
    ctx.obj = bootstrap.storefront_api(settings)
    ctx.meta["settings"] = settings


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def shipping() -> None:
    """Address lookup and shipping quotes."""


@cli.group()
def product() -> None:
    """Manage the catalog."""


# Register subcommands
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
shipping.add_command(shipping_quote)
product.add_command(product_add)
product.add_command(product_list)
