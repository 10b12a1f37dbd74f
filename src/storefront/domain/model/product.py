"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is replenished by the back-office and consumed
by committed orders.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    The catalog owns the stock counter; order commits mutate it but
    never own it.
    """

    id: int
    name: str
    price: Money
    stock: int = 0

    def decrement_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        Raises InsufficientStockError instead of letting stock go negative.
        """
        if quantity <= 0:
            raise ValidationError("Stock decrement must be positive")
        if quantity > self.stock:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock})"
            )
        self.stock -= quantity
