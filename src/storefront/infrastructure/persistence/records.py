"""Conversion between domain objects and JSON records."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import (
    Customer,
    Order,
    OrderLine,
    OrderStatus,
    ShippingAddress,
)
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Email, Money, PostalCode, Quantity


def product_to_record(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "stock": product.stock,
    }


def product_from_record(raw: dict) -> Product:
    return Product(
        id=raw["id"],
        name=raw["name"],
        price=Money(Decimal(raw["price"]), raw.get("currency", "BRL")),
        stock=raw.get("stock", 0),
    )


def order_to_record(order: Order) -> dict:
    return {
        "id": order.id,
        "customer_name": order.customer.name,
        "email": str(order.customer.email),
        "postal_code": order.address.postal_code.digits,
        "street": order.address.street,
        "number": order.address.number,
        "complement": order.address.complement,
        "city": order.address.city,
        "region": order.address.region,
        "subtotal": str(order.subtotal.amount),
        "shipping_cost": str(order.shipping_cost.amount),
        "total": str(order.total.amount),
        "currency": order.shipping_cost.currency,
        "status": order.status.value,
        "created_at": order.created_at.isoformat(),
    }


def line_to_record(order_id: int, line: OrderLine) -> dict:
    return {
        "order_id": order_id,
        "product_id": line.product_id,
        "product_name": line.product_name,
        "quantity": line.quantity.value,
        "unit_price": str(line.unit_price.amount),
        "currency": line.unit_price.currency,
        "subtotal": str(line.line_total.amount),
    }


def line_from_record(raw: dict) -> OrderLine:
    return OrderLine(
        product_id=raw["product_id"],
        product_name=raw["product_name"],
        quantity=Quantity(raw["quantity"]),
        unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "BRL")),
        order_id=raw["order_id"],
    )


def order_from_record(raw: dict, line_records: list[dict]) -> Order:
    """Reconstitute an order; subtotal and total are derived from the lines."""
    return Order(
        id=raw["id"],
        customer=Customer(name=raw["customer_name"], email=Email(raw["email"])),
        address=ShippingAddress(
            postal_code=PostalCode(raw["postal_code"]),
            street=raw["street"],
            number=raw["number"],
            city=raw["city"],
            region=raw["region"],
            complement=raw.get("complement", ""),
        ),
        lines=[line_from_record(r) for r in line_records],
        shipping_cost=Money(Decimal(raw["shipping_cost"]), raw.get("currency", "BRL")),
        status=OrderStatus(raw["status"]),
        created_at=datetime.fromisoformat(raw["created_at"]),
    )
