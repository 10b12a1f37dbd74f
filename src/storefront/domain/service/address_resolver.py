"""Domain service: Address Resolver.

Normalises a customer-typed postal code and asks the address directory
for it. Format errors are raised before the directory is consulted, so
a typo never costs a network round trip.
"""

from __future__ import annotations

import structlog

from storefront.domain.model.address import Address
from storefront.domain.model.value_objects import PostalCode
from storefront.domain.repository.address_directory import AddressDirectory

log = structlog.get_logger(__name__)


class AddressResolver:

    def __init__(self, directory: AddressDirectory) -> None:
        self._directory = directory

    def resolve(self, raw_postal_code: str) -> Address:
        """Resolve a postal code to an address.

        Raises:
            InvalidFormat: not exactly 8 digits once non-digits are stripped.
            PostalCodeNotFoundError: the directory does not know the code.
            TransportError: the directory could not be consulted.
        """
        postal_code = PostalCode.parse(raw_postal_code)
        log.debug("resolving_postal_code", postal_code=postal_code.digits)
        return self._directory.lookup(postal_code)
