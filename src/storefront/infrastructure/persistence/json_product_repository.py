"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_document import JsonDocument
from storefront.infrastructure.persistence.records import (
    product_from_record,
    product_to_record,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, document: JsonDocument) -> None:
        self._document = document

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        products = self._document.load()["products"]
        if not products:
            return 1
        return max(p["id"] for p in products) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._document.load()["products"]:
            if raw["id"] == product_id:
                return product_from_record(raw)
        return None

    def list_all(self) -> list[Product]:
        return [product_from_record(raw) for raw in self._document.load()["products"]]

    def save(self, product: Product) -> None:
        with self._document.lock:
            data = self._document.load()
            records = data["products"]
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = product_to_record(product)
                    break
            else:
                records.append(product_to_record(product))
            self._document.persist(data)
