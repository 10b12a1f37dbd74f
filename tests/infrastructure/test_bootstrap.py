"""Tests for the wired application: concurrent requests share one StorefrontApi."""

import threading
import time

import pytest

from storefront.application.auth import AdminContext
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork
from tests.builders import product


@pytest.fixture
def settings(tmp_path):
    settings = Settings(data_dir=tmp_path, admin_token="s3cret")
    products = bootstrap.product_repository(settings)
    products.save(product(1, "Honey Jar", "10.00", stock=5))
    products.save(product(2, "Beeswax Candle", "25.00", stock=5))
    return settings


@pytest.fixture
def slow_begin(monkeypatch):
    # Keep each transaction open long enough for the other request to arrive.
    original = JsonUnitOfWork.begin

    def begin(self):
        original(self)
        time.sleep(0.05)

    monkeypatch.setattr(JsonUnitOfWork, "begin", begin)


def _checkout(product_id, price):
    return {
        "customerName": "Alice Souza",
        "email": "alice@shop.com.br",
        "postalCode": "01310-100",
        "street": "Avenida Paulista",
        "number": "1000",
        "city": "São Paulo",
        "region": "SP",
        "cart": [{"id": product_id, "quantity": 1, "price": price}],
    }


class TestConcurrentRequests:

    def test_simultaneous_orders_are_serialised(self, settings, slow_begin):
        api = bootstrap.storefront_api(settings)
        results: list[dict] = []
        barrier = threading.Barrier(2)

        def place(product_id, price):
            barrier.wait()
            results.append(api.place_order(_checkout(product_id, price)))

        threads = [
            threading.Thread(target=place, args=(1, "10.00")),
            threading.Thread(target=place, args=(2, "25.00")),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r["success"] for r in results), results
        assert sorted(r["orderId"] for r in results) == [1, 2]

        products = bootstrap.product_repository(settings)
        assert products.get_by_id(1).stock == 4
        assert products.get_by_id(2).stock == 4

    def test_last_unit_sold_once(self, settings, slow_begin):
        products = bootstrap.product_repository(settings)
        candle = products.get_by_id(2)
        candle.stock = 1
        products.save(candle)

        api = bootstrap.storefront_api(settings)
        results: list[dict] = []
        barrier = threading.Barrier(3)

        def place():
            barrier.wait()
            results.append(api.place_order(_checkout(2, "25.00")))

        threads = [threading.Thread(target=place) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(r.get("error", "ok") for r in results) == [
            "insufficient_stock",
            "insufficient_stock",
            "ok",
        ]
        assert products.get_by_id(2).stock == 0

    def test_status_updates_respect_terminal_states(self, settings):
        api = bootstrap.storefront_api(settings)
        admin = AdminContext(token="s3cret")
        order_id = api.place_order(_checkout(1, "10.00"))["orderId"]
        for status in ("paid", "shipped", "delivered"):
            assert api.update_order_status(admin, {"orderId": order_id, "newStatus": status})["success"]

        response = api.update_order_status(admin, {"orderId": order_id, "newStatus": "cancelled"})

        assert response["success"] is False
        assert api.show_order(order_id)["order"]["status"] == "delivered"
