"""JSON-file-backed implementation of OrderUnitOfWork.

``begin()`` takes the document lock and works on an in-memory copy of
the store; ``commit()`` writes that copy back in one atomic replace and
``rollback()`` throws it away. Holding the lock for the whole transaction
serialises concurrent commits, so stock is never decremented from a
stale read.

One instance is shared by every request: the open transaction belongs
to the calling thread, and a second thread's ``begin()`` waits on the
lock instead of seeing the first thread's working copy.
"""

from __future__ import annotations

import threading

from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import OrderUnitOfWork
from storefront.infrastructure.persistence.json_document import JsonDocument
from storefront.infrastructure.persistence.records import (
    line_to_record,
    order_to_record,
    product_from_record,
    product_to_record,
)


class JsonUnitOfWork(OrderUnitOfWork):

    def __init__(self, document: JsonDocument) -> None:
        self._document = document
        self._local = threading.local()

    @property
    def _working(self) -> dict | None:
        return getattr(self._local, "working", None)

    def begin(self) -> None:
        if self._working is not None:
            raise RuntimeError("Transaction already open")
        self._document.lock.acquire()
        try:
            self._local.working = self._document.load()
        except BaseException:
            self._document.lock.release()
            raise

    def get_product(self, product_id: int) -> Product | None:
        raw = self._find_product(product_id)
        return product_from_record(raw) if raw is not None else None

    def insert_order(self, order: Order) -> int:
        data = self._data()
        order_id = max((o["id"] for o in data["orders"]), default=0) + 1
        record = order_to_record(order)
        record["id"] = order_id
        data["orders"].append(record)
        return order_id

    def insert_order_line(self, order_id: int, line: OrderLine) -> None:
        data = self._data()
        if not any(o["id"] == order_id for o in data["orders"]):
            raise ValueError(f"Order #{order_id} was not inserted in this transaction")
        data["order_lines"].append(line_to_record(order_id, line))

    def decrement_stock(self, product_id: int, quantity: int) -> None:
        raw = self._find_product(product_id)
        if raw is None:
            raise ValueError(f"Product #{product_id} does not exist")
        product = product_from_record(raw)
        product.decrement_stock(quantity)
        raw.update(product_to_record(product))

    def commit(self) -> None:
        data = self._data()
        try:
            self._document.persist(data)
        finally:
            self._close()

    def rollback(self) -> None:
        if self._working is not None:
            self._close()

    # --- Internal helpers -----------------------------------------------------

    def _data(self) -> dict:
        if self._working is None:
            raise RuntimeError("No transaction open")
        return self._working

    def _find_product(self, product_id: int) -> dict | None:
        for raw in self._data()["products"]:
            if raw["id"] == product_id:
                return raw
        return None

    def _close(self) -> None:
        self._local.working = None
        self._document.lock.release()
