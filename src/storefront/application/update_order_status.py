"""Application service: Update Order Status use case (admin).

The requested value is parsed into the closed ``OrderStatus`` enum and
the move is checked against the order's transition table; on any
rejection the stored order is left untouched.
"""

from __future__ import annotations

import structlog

from storefront.application.auth import AdminContext, Authorizer
from storefront.application.dto import StatusChangeDTO
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

log = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, authorizer: Authorizer) -> None:
        self._order_repo = order_repo
        self._authorizer = authorizer

    def handle(self, admin: AdminContext, order_id: int, new_status: str) -> StatusChangeDTO:
        self._authorizer.require_admin(admin)
        status = OrderStatus.parse(new_status)

        previous = self._order_repo.change_status(order_id, status)

        log.info(
            "order_status_changed",
            order_id=order_id,
            previous=previous.value,
            status=status.value,
        )
        return StatusChangeDTO(
            order_id=order_id,
            previous_status=previous.value,
            new_status=status.value,
        )
