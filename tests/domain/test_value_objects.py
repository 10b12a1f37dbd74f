"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import InvalidFormat, ValidationError
from storefront.domain.model.value_objects import Email, Money, PostalCode, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "BRL"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_written_digits(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_of_rejects_non_finite(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("NaN")

    def test_of_rejects_bool(self):
        with pytest.raises(ValidationError):
            Money.of(True)

    @pytest.mark.parametrize("raw", ["1e5000000", "1000000.01", 1e30])
    def test_of_rejects_oversized_amounts(self, raw):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of(raw)

    @pytest.mark.parametrize("raw", ["10.001", "1e-5000000", 0.30000000000000004])
    def test_of_rejects_fractions_of_a_cent(self, raw):
        with pytest.raises(ValidationError, match="more than two decimals"):
            Money.of(raw)

    def test_of_accepts_trailing_zeros(self):
        assert Money.of("10.100") == Money.of("10.10")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "BRL") + Money(Decimal("5"), "USD")

    def test_str_and_wire_formatting(self):
        assert str(Money.of("15")) == "R$ 15.00"
        assert Money.of("9.5").to_wire() == "9.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    def test_upper_bound(self):
        assert Quantity(9999).value == 9999
        with pytest.raises(ValidationError, match="cannot exceed 9999"):
            Quantity(10**30)

    @pytest.mark.parametrize("value", ["2", 1.5, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(value)


# ── PostalCode ───────────────────────────────────────────────────────────────


class TestPostalCode:

    def test_parse_strips_formatting(self):
        assert PostalCode.parse("01310-100").digits == "01310100"
        assert PostalCode.parse(" 01.310 100 ").digits == "01310100"

    def test_str_is_formatted(self):
        assert str(PostalCode("01310100")) == "01310-100"

    @pytest.mark.parametrize("raw", ["", "1234567", "123456789", "abc", None])
    def test_wrong_digit_count_rejected(self, raw):
        with pytest.raises(InvalidFormat) as excinfo:
            PostalCode.parse(raw)
        assert excinfo.value.field == "postalCode"


# ── Email ────────────────────────────────────────────────────────────────────


class TestEmail:

    def test_valid(self):
        assert str(Email("alice@shop.com.br")) == "alice@shop.com.br"

    @pytest.mark.parametrize("raw", ["alice", "alice@", "@shop.com", "a b@shop.com"])
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            Email(raw)
        assert excinfo.value.field == "email"
