"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_document import JsonDocument
from storefront.infrastructure.persistence.records import (
    order_from_record,
    order_to_record,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, document: JsonDocument) -> None:
        self._document = document

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        data = self._document.load()
        for raw in data["orders"]:
            if raw["id"] == order_id:
                return order_from_record(raw, self._lines_of(data, order_id))
        return None

    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        data = self._document.load()
        orders = [
            order_from_record(raw, self._lines_of(data, raw["id"]))
            for raw in data["orders"]
            if status is None or raw["status"] == status.value
        ]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def change_status(self, order_id: int, status: OrderStatus) -> OrderStatus:
        """Update the stored header; lines are immutable and never rewritten."""
        with self._document.lock:
            data = self._document.load()
            raw = next((o for o in data["orders"] if o["id"] == order_id), None)
            if raw is None:
                raise OrderNotFoundError(f"Order #{order_id} not found")

            order = order_from_record(raw, self._lines_of(data, order_id))
            previous = order.change_status(status)
            raw.update(order_to_record(order))
            self._document.persist(data)
        return previous

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _lines_of(data: dict, order_id: int) -> list[dict]:
        return [line for line in data["order_lines"] if line["order_id"] == order_id]
