"""Integration tests for the PlaceOrder use case.

Uses in-memory fakes — no file I/O.
"""

import pytest

from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import CommitError, ValidationError
from storefront.domain.service.order_commit_service import OrderCommitService
from tests.builders import cart_line, customer_info, product
from tests.fakes import FakeOrderRepository, FakeUnitOfWork, InMemoryStore


def _setup(*products):
    if not products:
        products = (
            product(1, "Honey Jar", "10.00", stock=10),
            product(2, "Beeswax Candle", "25.00", stock=10),
        )
    store = InMemoryStore.with_products(*products)
    handler = PlaceOrderHandler(OrderCommitService(FakeUnitOfWork(store)))
    return handler, store


class TestPlaceOrderHappyPath:

    def test_places_order_with_server_side_shipping(self):
        handler, store = _setup()
        placed = handler.handle(
            customer_info(region="SP"),
            [cart_line(1, 2, "10.00"), cart_line(2, 1, "25.00")],
        )
        assert placed.order_id == 1
        assert placed.subtotal == "45.00"
        assert placed.shipping_cost == "20.00"
        assert placed.total == "65.00"
        assert store.products[1].stock == 8
        assert store.products[2].stock == 9

    def test_bulky_cart_pays_surcharge(self):
        handler, _ = _setup()
        placed = handler.handle(customer_info(region="SP"), [cart_line(1, 5, "10.00")])
        assert placed.shipping_cost == "30.00"
        assert placed.total == "80.00"

    def test_matching_client_shipping_cost_accepted(self):
        handler, _ = _setup()
        placed = handler.handle(customer_info(region="RJ"), [cart_line(1, 1)], shipping_cost=25)
        assert placed.shipping_cost == "25.00"

    def test_persisted_order_matches_response(self):
        handler, store = _setup()
        placed = handler.handle(customer_info(), [cart_line(1, 1)])
        order = FakeOrderRepository(store).get_by_id(placed.order_id)
        assert order.total.to_wire() == placed.total
        assert order.address.region == "SP"


class TestPlaceOrderRejections:

    def test_stale_client_shipping_cost_rejected(self):
        handler, store = _setup()
        with pytest.raises(ValidationError, match="out of date") as excinfo:
            handler.handle(customer_info(region="SP"), [cart_line(1, 1)], shipping_cost="15.00")
        assert excinfo.value.field == "shippingCost"
        assert store.orders == {}

    def test_garbage_client_shipping_cost_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError) as excinfo:
            handler.handle(customer_info(), [cart_line(1, 1)], shipping_cost="abc")
        assert excinfo.value.field == "shippingCost"

    def test_validation_error_writes_nothing(self):
        handler, store = _setup()
        with pytest.raises(ValidationError):
            handler.handle(customer_info(email="nope"), [cart_line(1, 1)])
        assert store.orders == {}
        assert store.products[1].stock == 10

    def test_insufficient_stock_rejected(self):
        handler, store = _setup(product(1, stock=1))
        with pytest.raises(CommitError):
            handler.handle(customer_info(), [cart_line(1, 2)])
        assert store.products[1].stock == 1
