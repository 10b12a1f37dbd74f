"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.add_product import AddProductHandler
from storefront.application.auth import Authorizer
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.quote_shipping import QuoteShippingHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.service.address_resolver import AddressResolver
from storefront.domain.service.order_commit_service import OrderCommitService
from storefront.infrastructure.address.viacep_directory import ViaCepAddressDirectory
from storefront.infrastructure.api.endpoints import StorefrontApi
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_document import JsonDocument
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def store_document(settings: Settings) -> JsonDocument:
    return JsonDocument(settings.data_dir / "store.json")


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(store_document(settings))


def address_resolver(settings: Settings) -> AddressResolver:
    return AddressResolver(
        ViaCepAddressDirectory(settings.address_url, settings.address_timeout)
    )


def storefront_api(settings: Settings) -> StorefrontApi:
    document = store_document(settings)
    orders = JsonOrderRepository(document)
    authorizer = Authorizer(settings.admin_token)

    return StorefrontApi(
        place_order=PlaceOrderHandler(OrderCommitService(JsonUnitOfWork(document))),
        quote_shipping=QuoteShippingHandler(address_resolver(settings)),
        update_status=UpdateOrderStatusHandler(orders, authorizer),
        show_order=ShowOrderHandler(orders),
        list_orders=ListOrdersHandler(orders, authorizer),
        add_product=AddProductHandler(JsonProductRepository(document), authorizer),
    )
