"""Application service: Quote Shipping use case (checkout step)."""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import ShippingQuoteDTO
from storefront.domain.service import shipping_estimator
from storefront.domain.service.address_resolver import AddressResolver


class QuoteShippingHandler:

    def __init__(self, resolver: AddressResolver) -> None:
        self._resolver = resolver

    def handle(self, postal_code: str, quantities: Iterable[object]) -> ShippingQuoteDTO:
        """Resolve the postal code, then quote shipping to its region."""
        address = self._resolver.resolve(postal_code)
        quote = shipping_estimator.estimate(
            address.region, shipping_estimator.count_items(quantities)
        )
        return ShippingQuoteDTO.build(address, quote)
