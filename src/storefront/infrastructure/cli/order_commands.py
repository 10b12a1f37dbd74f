"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json

import click

from storefront.infrastructure.cli.output import admin_context, api, emit, token_option


@click.command("place")
@click.argument("payload", type=click.File("r", encoding="utf-8"))
def order_place(payload) -> None:
    """Place an order from a checkout JSON document ('-' reads stdin)."""
    try:
        body = json.load(payload)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Payload is not valid JSON: {exc}")

    emit(api().place_order(body))


def _display_order(order: dict) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{order['id']}  (status={order['status']})")
    click.echo(f"Customer: {order['customerName']} <{order['email']}>")
    click.echo(
        f"Ship to:  {order['street']}, {order['number']} {order['complement']}".rstrip()
    )
    click.echo(f"          {order['city']}/{order['region']}  {order['postalCode']}")
    click.echo(f"Created:  {order['createdAt']}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in order["lines"]:
        click.echo(
            f"  {line['productName']:<20} {line['quantity']:>5} "
            f"{line['unitPrice']:>10} {line['subtotal']:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {order['subtotal']:>20}")
    click.echo(f"  {'Shipping':<27} {order['shippingCost']:>20}")
    click.echo(f"  {'Order Total':<27} {order['total']:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print raw JSON.")
def order_show(order_id: int, as_json: bool) -> None:
    """Show details of an existing order."""
    response = api().show_order(order_id)
    if as_json or not response["success"]:
        emit(response)
        return
    _display_order(response["order"])


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", "new_status", required=True, help="New status.")
@token_option
def order_status(order_id: int, new_status: str, token: str | None) -> None:
    """Change an order's status (admin)."""
    emit(
        api().update_order_status(
            admin_context(token), {"orderId": order_id, "newStatus": new_status}
        )
    )


@click.command("list")
@click.option("--status", default=None, help="Only orders in this status.")
@token_option
def order_list(status: str | None, token: str | None) -> None:
    """List orders, newest first (admin)."""
    response = api().list_orders(admin_context(token), status)
    if not response["success"]:
        emit(response)
        return

    if not response["orders"]:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<24} {'Status':<10} {'Total':>10}  Created")
    click.echo("-" * 72)
    for o in response["orders"]:
        click.echo(
            f"{o['id']:<6} {o['customerName']:<24} {o['status']:<10} "
            f"{o['total']:>10}  {o['createdAt']}"
        )
