"""Request layer: JSON payloads in, JSON-ready dicts out.

Every operation answers ``{"success": true, ...}`` or
``{"success": false, "message": ...}``; domain errors never escape as
exceptions. Commit failures are reported with a generic message and a
short error code, the cause only goes to the log.
"""

from __future__ import annotations

from typing import Any

import structlog

from storefront.application.add_product import AddProductHandler
from storefront.application.auth import AdminContext
from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.quote_shipping import QuoteShippingHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import (
    AuthorizationError,
    CommitError,
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    PriceChangedError,
    ProductNotFoundError,
    TransportError,
    ValidationError,
)
from storefront.domain.model.cart import CartLine, CustomerInfo

log = structlog.get_logger(__name__)

Response = dict[str, Any]


class StorefrontApi:

    def __init__(
        self,
        place_order: PlaceOrderHandler,
        quote_shipping: QuoteShippingHandler,
        update_status: UpdateOrderStatusHandler,
        show_order: ShowOrderHandler,
        list_orders: ListOrdersHandler,
        add_product: AddProductHandler,
    ) -> None:
        self._place_order = place_order
        self._quote_shipping = quote_shipping
        self._update_status = update_status
        self._show_order = show_order
        self._list_orders = list_orders
        self._add_product = add_product

    # --- Public storefront ----------------------------------------------------

    def place_order(self, payload: Any) -> Response:
        try:
            body = _require_object(payload)
            info = CustomerInfo(
                customer_name=body.get("customerName"),
                email=body.get("email"),
                postal_code=body.get("postalCode"),
                street=body.get("street"),
                number=_as_text(body.get("number")),
                city=body.get("city"),
                region=body.get("region"),
                complement=body.get("complement"),
            )
            cart = [_cart_line(item) for item in _cart_items(body)]
            placed = self._place_order.handle(info, cart, body.get("shippingCost"))
        except DomainException as exc:
            return _failure(exc, operation="place_order")

        return {
            "success": True,
            "message": "Order created",
            "orderId": placed.order_id,
            "subtotal": placed.subtotal,
            "shippingCost": placed.shipping_cost,
            "total": placed.total,
        }

    def quote_shipping(self, payload: Any) -> Response:
        try:
            body = _require_object(payload)
            postal_code = body.get("postalCode")
            if not isinstance(postal_code, str) or not postal_code.strip():
                raise ValidationError("Postal code is required", field="postalCode")
            quantities = [
                item.get("quantity") if isinstance(item, dict) else None
                for item in _cart_items(body)
            ]
            quote = self._quote_shipping.handle(postal_code, quantities)
        except DomainException as exc:
            return _failure(exc, operation="quote_shipping")

        return {
            "success": True,
            "address": {
                "postalCode": quote.address.postal_code,
                "street": quote.address.street,
                "complement": quote.address.complement,
                "neighborhood": quote.address.neighborhood,
                "city": quote.address.city,
                "region": quote.address.region,
            },
            "shipping": {"amount": quote.amount, "leadTime": quote.lead_time},
        }

    def show_order(self, order_id: Any) -> Response:
        try:
            dto = self._show_order.handle(_order_id(order_id))
        except DomainException as exc:
            return _failure(exc, operation="show_order")
        return {"success": True, "order": _order_json(dto)}

    # --- Back-office ----------------------------------------------------------

    def update_order_status(self, admin: AdminContext, payload: Any) -> Response:
        try:
            body = _require_object(payload)
            new_status = body.get("newStatus")
            if not isinstance(new_status, str) or not new_status.strip():
                raise ValidationError("Status is required", field="newStatus")
            change = self._update_status.handle(admin, _order_id(body.get("orderId")), new_status)
        except DomainException as exc:
            return _failure(exc, operation="update_order_status")

        return {
            "success": True,
            "message": (
                f"Status changed from '{change.previous_status}' "
                f"to '{change.new_status}'"
            ),
            "orderId": change.order_id,
            "newStatus": change.new_status,
        }

    def list_orders(self, admin: AdminContext, status: str | None = None) -> Response:
        try:
            orders = self._list_orders.handle(admin, status)
        except DomainException as exc:
            return _failure(exc, operation="list_orders")
        return {
            "success": True,
            "total": len(orders),
            "orders": [_order_json(dto) for dto in orders],
        }

    def add_product(self, admin: AdminContext, payload: Any) -> Response:
        try:
            body = _require_object(payload)
            stock = body.get("stock", 0)
            if not isinstance(stock, int) or isinstance(stock, bool):
                raise ValidationError("Stock must be an integer", field="stock")
            product = self._add_product.handle(
                admin,
                name=body.get("name") or "",
                price=body.get("price"),
                stock=stock,
            )
        except DomainException as exc:
            return _failure(exc, operation="add_product")

        return {
            "success": True,
            "product": {
                "id": product.id,
                "name": product.name,
                "price": product.price.to_wire(),
                "stock": product.stock,
            },
        }


# --- Payload parsing ----------------------------------------------------------


def _require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _as_text(value: Any) -> Any:
    # House numbers arrive as numbers from some forms.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _cart_items(body: dict) -> list:
    # Anything but a list counts as an empty cart.
    cart = body.get("cart")
    return cart if isinstance(cart, list) else []


def _cart_line(item: Any) -> CartLine:
    if not isinstance(item, dict):
        return CartLine(product_id=None, quantity=None, unit_price=None)
    return CartLine(
        product_id=item.get("id"),
        quantity=item.get("quantity"),
        unit_price=item.get("price"),
    )


def _order_id(raw: Any) -> int:
    if isinstance(raw, str) and raw.strip().isdigit():
        raw = int(raw)
    if not isinstance(raw, int) or isinstance(raw, bool) or raw <= 0:
        raise ValidationError("Order id is required", field="orderId")
    return raw


# --- Rendering ----------------------------------------------------------------


def _order_json(dto: OrderDTO) -> Response:
    return {
        "id": dto.id,
        "customerName": dto.customer_name,
        "email": dto.email,
        "postalCode": dto.postal_code,
        "street": dto.street,
        "number": dto.number,
        "complement": dto.complement,
        "city": dto.city,
        "region": dto.region,
        "status": dto.status,
        "subtotal": dto.subtotal,
        "shippingCost": dto.shipping_cost,
        "total": dto.total,
        "createdAt": dto.created_at,
        "lines": [
            {
                "productId": line.product_id,
                "productName": line.product_name,
                "quantity": line.quantity,
                "unitPrice": line.unit_price,
                "subtotal": line.line_total,
            }
            for line in dto.lines
        ],
    }


_COMMIT_ERROR_CODES: tuple[tuple[type[CommitError], str], ...] = (
    (InsufficientStockError, "insufficient_stock"),
    (PriceChangedError, "price_changed"),
    (ProductNotFoundError, "product_not_found"),
)


def _failure(exc: DomainException, operation: str) -> Response:
    log.info("request_rejected", operation=operation, error=type(exc).__name__)

    if isinstance(exc, CommitError):
        code = next(
            (c for kind, c in _COMMIT_ERROR_CODES if isinstance(exc, kind)),
            "commit_failed",
        )
        return {"success": False, "message": "Could not process order", "error": code}
    if isinstance(exc, ValidationError):
        response: Response = {"success": False, "message": str(exc)}
        if exc.field:
            response["field"] = exc.field
        return response
    if isinstance(exc, TransportError):
        return {
            "success": False,
            "message": "Address service unavailable, please try again",
            "retryable": True,
        }
    if isinstance(exc, AuthorizationError):
        return {"success": False, "message": str(exc), "authenticated": False}
    if isinstance(exc, EntityNotFoundError):
        return {"success": False, "message": str(exc), "notFound": True}
    return {"success": False, "message": str(exc)}
