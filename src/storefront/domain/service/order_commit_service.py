"""Domain service: Order Commit.

Persists an assembled order as one all-or-nothing unit: the header, every
line and every stock decrement land together or not at all. Inside the
transaction each line is checked against the catalog, so a stale cart
price or an exhausted product aborts the whole order instead of being
written.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from storefront.domain.exceptions import (
    CommitError,
    PriceChangedError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.repository.unit_of_work import OrderUnitOfWork

log = structlog.get_logger(__name__)


class OrderCommitService:

    def __init__(self, uow: OrderUnitOfWork) -> None:
        # Shared across requests; the unit of work keeps one transaction per thread.
        self._uow = uow

    def commit(self, order: Order) -> int:
        """Write *order* and decrement stock; return the new order id.

        Raises ValidationError for malformed input (before anything is
        written) and CommitError for anything that goes wrong afterwards,
        in which case every change has been rolled back.
        """
        self._check_writable(order)

        try:
            self._uow.begin()
            order_id = self._uow.insert_order(order)
            committed_lines = [self._write_line(order_id, line) for line in order.lines]
            self._uow.commit()
        except Exception as exc:
            self._uow.rollback()
            log.warning(
                "order_commit_failed",
                customer=order.customer.name,
                error=type(exc).__name__,
                cause=str(exc),
            )
            if isinstance(exc, CommitError):
                raise
            raise CommitError("Could not process order") from exc

        order.id = order_id
        order.lines = committed_lines
        log.info(
            "order_committed",
            order_id=order_id,
            lines=len(committed_lines),
            total=order.total.to_wire(),
        )
        return order_id

    # --- Internal helpers -----------------------------------------------------

    def _write_line(self, order_id: int, line: OrderLine) -> OrderLine:
        product = self._uow.get_product(line.product_id)
        if product is None:
            raise ProductNotFoundError(f"Product #{line.product_id} not found")
        if product.price != line.unit_price:
            raise PriceChangedError(
                f"Price of {product.name} changed from {line.unit_price} "
                f"to {product.price}"
            )

        stored = replace(line, order_id=order_id, product_name=product.name)
        self._uow.insert_order_line(order_id, stored)
        self._uow.decrement_stock(line.product_id, line.quantity.value)
        return stored

    @staticmethod
    def _check_writable(order: Order) -> None:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} is already committed")
        if order.status != OrderStatus.PENDING:
            raise ValidationError("New orders must start as pending")
        if not order.lines:
            raise ValidationError("Order must contain at least one line", field="cart")
