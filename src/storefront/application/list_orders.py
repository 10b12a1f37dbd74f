"""Application service: List Orders use case (admin query)."""

from __future__ import annotations

from storefront.application.auth import AdminContext, Authorizer
from storefront.application.dto import OrderDTO
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, authorizer: Authorizer) -> None:
        self._order_repo = order_repo
        self._authorizer = authorizer

    def handle(self, admin: AdminContext, status: str | None = None) -> list[OrderDTO]:
        """Return orders newest first, optionally only those in *status*."""
        self._authorizer.require_admin(admin)
        wanted = OrderStatus.parse(status) if status else None
        return [OrderDTO.from_order(o) for o in self._order_repo.list_all(wanted)]
