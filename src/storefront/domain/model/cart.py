"""Checkout input as submitted by the client.

These hold the raw, untrusted values exactly as they arrived; the order
assembler is what turns them into a validated Order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CartLine:
    product_id: Any
    quantity: Any
    unit_price: Any


@dataclass(frozen=True)
class CustomerInfo:
    """Customer and delivery fields from the checkout form."""

    customer_name: str | None
    email: str | None
    postal_code: str | None
    street: str | None
    number: str | None
    city: str | None
    region: str | None
    complement: str | None = None
