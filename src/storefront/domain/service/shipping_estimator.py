"""Domain service: Shipping Estimator.

Flat rate per federative unit plus a per-unit surcharge for bulky
carts. Pure: no I/O, and every region code gets a quote.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.address import ShippingQuote
from storefront.domain.model.value_objects import MAX_QUANTITY, Money

SURCHARGE_THRESHOLD = 3
SURCHARGE_PER_UNIT = Money(Decimal("5.00"))

DEFAULT_RATE = (Money(Decimal("50.00")), "7-10 dias úteis")

# Base rate and lead time by region code.
RATE_TABLE: dict[str, tuple[Money, str]] = {
    # Southeast
    "SP": (Money(Decimal("20.00")), "3-5 dias úteis"),
    "RJ": (Money(Decimal("25.00")), "4-6 dias úteis"),
    "MG": (Money(Decimal("30.00")), "5-7 dias úteis"),
    "ES": (Money(Decimal("35.00")), "6-8 dias úteis"),
    # South
    "PR": (Money(Decimal("35.00")), "5-7 dias úteis"),
    "SC": (Money(Decimal("40.00")), "6-8 dias úteis"),
    "RS": (Money(Decimal("45.00")), "7-9 dias úteis"),
    # Center-West
    "GO": (Money(Decimal("40.00")), "6-8 dias úteis"),
    "MT": (Money(Decimal("50.00")), "8-10 dias úteis"),
    "MS": (Money(Decimal("45.00")), "7-9 dias úteis"),
    "DF": (Money(Decimal("40.00")), "6-8 dias úteis"),
    # Northeast
    "BA": (Money(Decimal("45.00")), "7-9 dias úteis"),
    "SE": (Money(Decimal("50.00")), "8-10 dias úteis"),
    "AL": (Money(Decimal("50.00")), "8-10 dias úteis"),
    "PE": (Money(Decimal("50.00")), "8-10 dias úteis"),
    "PB": (Money(Decimal("55.00")), "9-11 dias úteis"),
    "RN": (Money(Decimal("55.00")), "9-11 dias úteis"),
    "CE": (Money(Decimal("60.00")), "10-12 dias úteis"),
    "PI": (Money(Decimal("60.00")), "10-12 dias úteis"),
    "MA": (Money(Decimal("65.00")), "11-13 dias úteis"),
    # North
    "TO": (Money(Decimal("65.00")), "11-13 dias úteis"),
    "PA": (Money(Decimal("70.00")), "12-14 dias úteis"),
    "AP": (Money(Decimal("75.00")), "13-15 dias úteis"),
    "RR": (Money(Decimal("80.00")), "14-16 dias úteis"),
    "AM": (Money(Decimal("80.00")), "14-16 dias úteis"),
    "AC": (Money(Decimal("85.00")), "15-17 dias úteis"),
    "RO": (Money(Decimal("75.00")), "13-15 dias úteis"),
}


def estimate(region_code: str, total_item_count: int) -> ShippingQuote:
    """Quote shipping to *region_code* for a cart of *total_item_count* units.

    Unknown regions get ``DEFAULT_RATE``. Every unit beyond
    ``SURCHARGE_THRESHOLD`` adds ``SURCHARGE_PER_UNIT``.
    """
    base, lead_time = RATE_TABLE.get((region_code or "").strip().upper(), DEFAULT_RATE)

    extra_units = total_item_count - SURCHARGE_THRESHOLD
    if extra_units > 0:
        base = base + SURCHARGE_PER_UNIT * extra_units

    return ShippingQuote(amount=base, lead_time=lead_time)


def count_items(quantities: Iterable[object]) -> int:
    """Sum cart quantities; a line without a usable quantity counts as one.

    Raises ValidationError (field ``cartLine``) for a quantity above
    ``MAX_QUANTITY``.
    """
    total = 0
    for qty in quantities:
        if isinstance(qty, int) and not isinstance(qty, bool) and qty > 0:
            if qty > MAX_QUANTITY:
                raise ValidationError(
                    f"Quantity cannot exceed {MAX_QUANTITY}", field="cartLine"
                )
            total += qty
        else:
            total += 1
    return total
