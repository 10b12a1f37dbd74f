"""Abstract address directory (postal code -> address)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.address import Address
from storefront.domain.model.value_objects import PostalCode


class AddressDirectory(ABC):

    @abstractmethod
    def lookup(self, postal_code: PostalCode) -> Address:
        """Return the address for *postal_code*.

        Raises PostalCodeNotFoundError when the directory has no entry and
        TransportError when the directory cannot be consulted.
        """
