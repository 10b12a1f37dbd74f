"""CLI commands for the checkout shipping step."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.output import api, emit


def _parse_items(raw: str) -> list[dict]:
    """Parse '3:2,7:1' (product id:quantity) into cart entries."""
    items: list[dict] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            items.append({"id": int(product_id), "quantity": int(qty_str)})
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'.")
    return items


@click.command("quote")
@click.option("--postal-code", required=True, help="Destination postal code (CEP).")
@click.option("--items", default=None, help="Cart as 'ProductId:Qty,ProductId:Qty'.")
def shipping_quote(postal_code: str, items: str | None) -> None:
    """Look up the address and quote shipping for a cart."""
    payload = {"postalCode": postal_code, "cart": _parse_items(items) if items else []}
    emit(api().quote_shipping(payload))
