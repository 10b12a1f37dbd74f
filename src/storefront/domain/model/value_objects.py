"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from email_validator import EmailNotValidError, validate_email

from storefront.domain.exceptions import InvalidFormat, ValidationError

CENTS = Decimal("0.01")
POSTAL_CODE_DIGITS = 8
MAX_QUANTITY = 9999
MAX_AMOUNT = Decimal("1000000.00")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"R$ {self.amount:.2f}"

    def to_wire(self) -> str:
        """Plain two-decimal string, e.g. ``"20.00"``."""
        return str(self.amount.quantize(CENTS))

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Accepts at most two decimal places and nothing above ``MAX_AMOUNT``.
        """
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        if abs(value) > MAX_AMOUNT:
            raise ValidationError(f"Money amount cannot exceed {MAX_AMOUNT}")
        if value != value.quantize(CENTS):
            raise ValidationError(f"Money amount has more than two decimals: {amount!r}")
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")
        if self.value > MAX_QUANTITY:
            raise ValidationError(f"Quantity cannot exceed {MAX_QUANTITY}")

    def __str__(self) -> str:
        return str(self.value)


_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class PostalCode:
    """Brazilian postal code (CEP), stored as its 8 digits."""

    digits: str

    def __post_init__(self) -> None:
        if len(self.digits) != POSTAL_CODE_DIGITS or not self.digits.isdigit():
            raise InvalidFormat(
                "Invalid postal code. Expected format: 00000-000",
                field="postalCode",
            )

    @staticmethod
    def parse(raw: str) -> PostalCode:
        """Strip everything but digits, then validate the length."""
        return PostalCode(_NON_DIGITS.sub("", raw or ""))

    def __str__(self) -> str:
        return f"{self.digits[:5]}-{self.digits[5:]}"


@dataclass(frozen=True)
class Email:
    """Syntactically valid e-mail address (no deliverability check)."""

    value: str

    def __post_init__(self) -> None:
        try:
            validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValidationError("Invalid email", field="email") from exc

    def __str__(self) -> str:
        return self.value
