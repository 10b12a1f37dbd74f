"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items. Lines are a
price snapshot taken at checkout and never change afterwards; only the
status moves, and only along the transitions listed below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import StatusError
from storefront.domain.model.value_objects import Email, Money, PostalCode, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus((raw or "").strip())
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise StatusError(f"Invalid status {raw!r}. Use: {allowed}") from None

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class Customer:
    name: str
    email: Email


@dataclass(frozen=True)
class ShippingAddress:
    postal_code: PostalCode
    street: str
    number: str
    city: str
    region: str
    complement: str = ""


@dataclass(frozen=True)
class OrderLine:
    """Captures the price of a product at checkout time."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout
    order_id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    New orders come out of the order assembler in ``pending`` status with
    ``id=None``; the id is assigned when the order commit succeeds.
    Repositories reconstitute persisted orders through ``__init__``
    without re-validating.
    """

    id: int | None
    customer: Customer
    address: ShippingAddress
    lines: list[OrderLine]
    shipping_cost: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> OrderStatus:
        """Move to *new_status*, returning the previous one.

        Raises StatusError if the transition is not allowed.
        """
        if self.status.is_terminal:
            raise StatusError(
                f"Cannot change order #{self.id} from {self.status.value}: "
                "the order is closed"
            )
        if new_status not in ALLOWED_TRANSITIONS[self.status]:
            raise StatusError(
                f"Cannot change order #{self.id} from "
                f"{self.status.value} to {new_status.value}"
            )
        previous = self.status
        self.status = new_status
        return previous

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping_cost
