"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the request/CLI layers and the application
layer without exposing domain internals to the outside world. Money is
rendered as two-decimal strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.address import Address, ShippingQuote
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class OrderPlacedDTO:
    order_id: int
    subtotal: str
    shipping_cost: str
    total: str


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the back-office."""

    id: int
    customer_name: str
    email: str
    postal_code: str
    street: str
    number: str
    complement: str
    city: str
    region: str
    status: str
    lines: list[OrderLineDTO]
    subtotal: str
    shipping_cost: str
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer.name,
            email=str(order.customer.email),
            postal_code=order.address.postal_code.digits,
            street=order.address.street,
            number=order.address.number,
            complement=order.address.complement,
            city=order.address.city,
            region=order.address.region,
            status=order.status.value,
            lines=[
                OrderLineDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity.value,
                    unit_price=line.unit_price.to_wire(),
                    line_total=line.line_total.to_wire(),
                )
                for line in order.lines
            ],
            subtotal=order.subtotal.to_wire(),
            shipping_cost=order.shipping_cost.to_wire(),
            total=order.total.to_wire(),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class AddressDTO:
    postal_code: str
    street: str
    complement: str
    neighborhood: str
    city: str
    region: str

    @staticmethod
    def from_address(address: Address) -> AddressDTO:
        return AddressDTO(
            postal_code=str(address.postal_code),
            street=address.street,
            complement=address.complement,
            neighborhood=address.neighborhood,
            city=address.city,
            region=address.region,
        )


@dataclass(frozen=True)
class ShippingQuoteDTO:
    address: AddressDTO
    amount: str
    lead_time: str

    @staticmethod
    def build(address: Address, quote: ShippingQuote) -> ShippingQuoteDTO:
        return ShippingQuoteDTO(
            address=AddressDTO.from_address(address),
            amount=quote.amount.to_wire(),
            lead_time=quote.lead_time,
        )


@dataclass(frozen=True)
class StatusChangeDTO:
    order_id: int
    previous_status: str
    new_status: str
