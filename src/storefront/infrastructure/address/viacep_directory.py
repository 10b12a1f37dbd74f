"""HTTP address directory backed by a ViaCEP-compatible service.

``GET {base_url}/ws/{digits}/json/`` answers either an address document
or ``{"erro": true}`` for codes it does not know. Anything else (network
failure, timeout, non-200 status, unparseable or incomplete body) is a
transport error, which callers may retry.
"""

from __future__ import annotations

import httpx
import structlog

from storefront.domain.exceptions import (
    AddressLookupTimeout,
    PostalCodeNotFoundError,
    TransportError,
)
from storefront.domain.model.address import Address
from storefront.domain.model.value_objects import PostalCode
from storefront.domain.repository.address_directory import AddressDirectory

log = structlog.get_logger(__name__)

_REQUIRED_KEYS = ("logradouro", "bairro", "localidade", "uf")


class ViaCepAddressDirectory(AddressDirectory):

    def __init__(
        self,
        base_url: str,
        timeout: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def lookup(self, postal_code: PostalCode) -> Address:
        payload = self._fetch(postal_code)

        if _is_not_found(payload):
            log.info("postal_code_not_found", postal_code=postal_code.digits)
            raise PostalCodeNotFoundError(f"Postal code {postal_code} not found")

        missing = [key for key in _REQUIRED_KEYS if not isinstance(payload.get(key), str)]
        if missing:
            log.warning(
                "address_lookup_failed",
                postal_code=postal_code.digits,
                reason="incomplete response",
                missing=missing,
            )
            raise TransportError("Address directory returned an incomplete address")

        return Address(
            postal_code=postal_code,
            street=payload["logradouro"],
            neighborhood=payload["bairro"],
            city=payload["localidade"],
            region=payload["uf"].upper(),
            complement=payload.get("complemento") or "",
        )

    # --- HTTP -----------------------------------------------------------------

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    def _fetch(self, postal_code: PostalCode) -> dict:
        try:
            with self._client() as client:
                response = client.get(f"/ws/{postal_code.digits}/json/")
        except httpx.TimeoutException as exc:
            log.warning("address_lookup_timeout", postal_code=postal_code.digits)
            raise AddressLookupTimeout(
                f"Address directory did not answer within {self._timeout}s"
            ) from exc
        except httpx.RequestError as exc:
            log.warning("address_lookup_failed", postal_code=postal_code.digits, reason=str(exc))
            raise TransportError("Address directory is unreachable") from exc

        if response.status_code != 200:
            log.warning(
                "address_lookup_failed",
                postal_code=postal_code.digits,
                status=response.status_code,
            )
            raise TransportError(
                f"Address directory answered HTTP {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError("Address directory returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise TransportError("Address directory returned an unexpected document")
        return payload


def _is_not_found(payload: dict) -> bool:
    marker = payload.get("erro")
    return marker is True or marker == "true"
