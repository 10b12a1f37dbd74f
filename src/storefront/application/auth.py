"""Explicit admin authorization.

Admin-facing handlers receive an ``AdminContext`` from their caller and
check it themselves through an ``Authorizer``; nothing is read from
ambient session state.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass

from storefront.domain.exceptions import AuthorizationError


@dataclass(frozen=True)
class AdminContext:
    token: str | None


class Authorizer:

    def __init__(self, admin_token: str | None) -> None:
        self._admin_token = admin_token

    def require_admin(self, context: AdminContext | None) -> None:
        """Raise AuthorizationError unless *context* carries the admin token.

        With no admin token configured every admin call is refused.
        """
        if not self._admin_token or context is None or not context.token:
            raise AuthorizationError("Access denied. Log in to continue.")
        if not hmac.compare_digest(context.token.encode(), self._admin_token.encode()):
            raise AuthorizationError("Access denied. Log in to continue.")
