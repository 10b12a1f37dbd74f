"""Application service: Add Product use case (admin)."""

from __future__ import annotations

from storefront.application.auth import AdminContext, Authorizer
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, authorizer: Authorizer) -> None:
        self._product_repo = product_repo
        self._authorizer = authorizer

    def handle(self, admin: AdminContext, name: str, price: str, stock: int) -> Product:
        """Add a new product to the catalog."""
        self._authorizer.require_admin(admin)

        if not name or not name.strip():
            raise ValidationError("Product name is required", field="name")

        amount = Money.of(price)
        if amount.amount <= 0:
            raise ValidationError("Product price must be greater than zero", field="price")
        if stock < 0:
            raise ValidationError("Stock cannot be negative", field="stock")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=amount,
            stock=stock,
        )
        self._product_repo.save(product)
        return product
