"""Application service: Place Order use case.

Checkout in one call: quote shipping for the delivery region, assemble
and validate the order, then hand it to the order commit. Shipping is
always recomputed here; a client-sent shipping cost is only compared
against it.
"""

from __future__ import annotations

from typing import Any

from storefront.application.dto import OrderPlacedDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLine, CustomerInfo
from storefront.domain.model.value_objects import Money
from storefront.domain.service import order_assembler, shipping_estimator
from storefront.domain.service.order_commit_service import OrderCommitService


class PlaceOrderHandler:

    def __init__(self, commit_service: OrderCommitService) -> None:
        self._commit_service = commit_service

    def handle(
        self,
        info: CustomerInfo,
        cart: list[CartLine],
        shipping_cost: Any = None,
    ) -> OrderPlacedDTO:
        """Place an order and return its id and totals.

        Steps:
        1. Quote shipping from the region and the cart's unit count.
        2. Assemble the order (validates every field and line).
        3. Reject a stale client-side shipping cost.
        4. Commit atomically (stock and prices re-checked inside).
        """
        item_count = shipping_estimator.count_items(line.quantity for line in cart)
        quote = shipping_estimator.estimate(info.region or "", item_count)

        order = order_assembler.assemble(info, cart, quote)

        if shipping_cost is not None:
            self._check_client_shipping(shipping_cost, order.shipping_cost)

        order_id = self._commit_service.commit(order)

        return OrderPlacedDTO(
            order_id=order_id,
            subtotal=order.subtotal.to_wire(),
            shipping_cost=order.shipping_cost.to_wire(),
            total=order.total.to_wire(),
        )

    @staticmethod
    def _check_client_shipping(raw: Any, expected: Money) -> None:
        try:
            sent = Money.of(raw)
        except ValidationError as exc:
            raise ValidationError("Invalid shipping cost", field="shippingCost") from exc
        if sent != expected:
            raise ValidationError(
                f"Shipping cost is out of date ({sent} instead of {expected}); "
                "recalculate shipping",
                field="shippingCost",
            )
