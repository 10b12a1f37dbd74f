"""Domain service: Order Assembler.

Validates a checkout submission and prices it, producing an unsaved
``pending`` Order. Prices come from the cart here; the order commit
checks them against the catalog inside its transaction.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.address import ShippingQuote
from storefront.domain.model.cart import CartLine, CustomerInfo
from storefront.domain.model.order import (
    Customer,
    Order,
    OrderLine,
    OrderStatus,
    ShippingAddress,
)
from storefront.domain.model.value_objects import Email, Money, PostalCode, Quantity

# Checked in this order; the first blank one is reported.
REQUIRED_FIELDS = (
    ("customer_name", "customerName"),
    ("email", "email"),
    ("postal_code", "postalCode"),
    ("street", "street"),
    ("number", "number"),
    ("city", "city"),
    ("region", "region"),
)

MAX_LINES = 50


def assemble(
    info: CustomerInfo,
    cart: list[CartLine],
    quote: ShippingQuote,
) -> Order:
    """Build a pending order from checkout input.

    Raises ValidationError naming the first offending field
    (``customerName`` … ``region``, ``email``, ``cart`` or ``cartLine``).
    """
    values = _required_values(info)

    customer = Customer(name=values["customer_name"], email=Email(values["email"]))
    address = ShippingAddress(
        postal_code=PostalCode.parse(values["postal_code"]),
        street=values["street"],
        number=values["number"],
        city=values["city"],
        region=values["region"].upper(),
        complement=(info.complement or "").strip(),
    )

    if not cart:
        raise ValidationError("Cart is empty", field="cart")
    if len(cart) > MAX_LINES:
        raise ValidationError(f"Maximum {MAX_LINES} lines per order", field="cart")

    lines = [_to_order_line(position, line) for position, line in enumerate(cart, 1)]

    return Order(
        id=None,
        customer=customer,
        address=address,
        lines=lines,
        shipping_cost=quote.amount,
        status=OrderStatus.PENDING,
    )


def _required_values(info: CustomerInfo) -> dict[str, str]:
    values: dict[str, str] = {}
    for attr, field_name in REQUIRED_FIELDS:
        raw = getattr(info, attr)
        if not isinstance(raw, str) or not raw.strip():
            raise ValidationError(f"Field '{field_name}' is required", field=field_name)
        values[attr] = raw.strip()
    return values


def _to_order_line(position: int, line: CartLine) -> OrderLine:
    product_id = line.product_id
    if isinstance(product_id, str) and product_id.strip().isdigit():
        product_id = int(product_id)
    if not isinstance(product_id, int) or isinstance(product_id, bool) or product_id <= 0:
        raise ValidationError(f"Cart line {position} has no valid product id", field="cartLine")

    try:
        quantity = Quantity(line.quantity)
        if line.unit_price is None:
            raise ValidationError("missing price")
        price = Money.of(line.unit_price)
    except ValidationError as exc:
        raise ValidationError(f"Cart line {position} is invalid: {exc}", field="cartLine") from exc
    if price.amount <= 0:
        raise ValidationError(f"Cart line {position} has a non-positive price", field="cartLine")

    return OrderLine(
        product_id=product_id,
        product_name="",
        quantity=quantity,
        unit_price=price,
    )
