"""Address lookup result and shipping quote value objects.

Neither is persisted: an address is copied into the order fields at
checkout and a quote is recomputed on demand.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money, PostalCode


@dataclass(frozen=True)
class Address:
    postal_code: PostalCode
    street: str
    neighborhood: str
    city: str
    region: str
    complement: str = ""


@dataclass(frozen=True)
class ShippingQuote:
    amount: Money
    lead_time: str
