"""Transactional port used by the order commit.

One unit of work spans a single order commit: everything between
``begin()`` and ``commit()`` becomes visible to readers at once, and
``rollback()`` discards all of it. Implementations must serialise
transactions that touch the same product so two commits cannot both
take the last unit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.product import Product


class OrderUnitOfWork(ABC):

    @abstractmethod
    def begin(self) -> None:
        """Open a transaction (and take whatever lock it needs)."""

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None:
        """Read a product as seen inside the open transaction."""

    @abstractmethod
    def insert_order(self, order: Order) -> int:
        """Insert the order header and return its generated id."""

    @abstractmethod
    def insert_order_line(self, order_id: int, line: OrderLine) -> None:
        """Insert one line row belonging to *order_id*."""

    @abstractmethod
    def decrement_stock(self, product_id: int, quantity: int) -> None:
        """Take *quantity* units out of the product's stock.

        Raises InsufficientStockError rather than going negative.
        """

    @abstractmethod
    def commit(self) -> None:
        """Make every change of this transaction durable and visible."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change of this transaction (no-op if none is open)."""

    def __enter__(self) -> OrderUnitOfWork:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
