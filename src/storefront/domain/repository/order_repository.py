"""Abstract repository for Order aggregate (read side and status updates).

New orders are never written through this interface: they go through
an ``OrderUnitOfWork`` so header, lines and stock change together.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with all its lines, or None if not found."""

    @abstractmethod
    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        """Return orders newest first, optionally filtered by status."""

    @abstractmethod
    def change_status(self, order_id: int, status: OrderStatus) -> OrderStatus:
        """Move a stored order to *status* and return its previous status.

        The read, the transition check and the write form one step: a
        concurrent update is never overwritten from a stale copy.

        Raises:
            OrderNotFoundError: no order with *order_id*.
            StatusError: the transition is not allowed.
        """
