"""Unit tests for the order assembler."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import InvalidFormat, ValidationError
from storefront.domain.model.address import ShippingQuote
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_assembler import assemble
from tests.builders import cart_line, customer_info

QUOTE = ShippingQuote(amount=Money.of("20.00"), lead_time="3-5 dias úteis")


class TestAssembleHappyPath:

    def test_builds_pending_unsaved_order(self):
        order = assemble(customer_info(), [cart_line(1, 2, "10.00")], QUOTE)
        assert order.id is None
        assert order.status == OrderStatus.PENDING
        assert len(order.lines) == 1
        assert order.lines[0].product_id == 1
        assert order.lines[0].quantity.value == 2

    def test_normalises_address_fields(self):
        order = assemble(
            customer_info(customer_name="  Alice  ", region=" sp ", postal_code="01310-100"),
            [cart_line()],
            QUOTE,
        )
        assert order.customer.name == "Alice"
        assert order.address.region == "SP"
        assert order.address.postal_code.digits == "01310100"

    def test_complement_is_optional(self):
        order = assemble(customer_info(complement=None), [cart_line()], QUOTE)
        assert order.address.complement == ""

    def test_numeric_string_product_id_accepted(self):
        order = assemble(customer_info(), [cart_line(product_id="3")], QUOTE)
        assert order.lines[0].product_id == 3


class TestAssembleTotals:

    def test_subtotal_is_decimal_exact(self):
        cart = [cart_line(1, 3, 0.1), cart_line(2, 1, "0.20")]
        order = assemble(customer_info(), cart, QUOTE)
        assert order.subtotal.amount == Decimal("0.50")

    def test_many_small_prices_do_not_drift(self):
        cart = [cart_line(i, 7, "19.99") for i in range(1, 11)]
        order = assemble(customer_info(), cart, QUOTE)
        assert order.subtotal.amount == Decimal("1399.30")

    def test_total_is_subtotal_plus_shipping(self):
        order = assemble(customer_info(), [cart_line(1, 2, "12.35")], QUOTE)
        assert order.total == Money.of("44.70")
        assert order.total == order.subtotal + QUOTE.amount


class TestAssembleRequiredFields:

    @pytest.mark.parametrize(
        "attr, field_name",
        [
            ("customer_name", "customerName"),
            ("email", "email"),
            ("postal_code", "postalCode"),
            ("street", "street"),
            ("number", "number"),
            ("city", "city"),
            ("region", "region"),
        ],
    )
    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_each_required_field_is_named(self, attr, field_name, blank):
        with pytest.raises(ValidationError) as excinfo:
            assemble(customer_info(**{attr: blank}), [cart_line()], QUOTE)
        assert excinfo.value.field == field_name

    def test_first_missing_field_is_reported(self):
        with pytest.raises(ValidationError) as excinfo:
            assemble(customer_info(street="", city=""), [cart_line()], QUOTE)
        assert excinfo.value.field == "street"

    def test_invalid_email(self):
        with pytest.raises(ValidationError) as excinfo:
            assemble(customer_info(email="not-an-email"), [cart_line()], QUOTE)
        assert excinfo.value.field == "email"

    def test_invalid_postal_code(self):
        with pytest.raises(InvalidFormat) as excinfo:
            assemble(customer_info(postal_code="1234"), [cart_line()], QUOTE)
        assert excinfo.value.field == "postalCode"


class TestAssembleCart:

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="Cart is empty") as excinfo:
            assemble(customer_info(), [], QUOTE)
        assert excinfo.value.field == "cart"

    @pytest.mark.parametrize(
        "line",
        [
            cart_line(product_id=None),
            cart_line(product_id=0),
            cart_line(product_id="abc"),
            cart_line(quantity=0),
            cart_line(quantity=-1),
            cart_line(quantity=None),
            cart_line(quantity="2"),
            cart_line(price=None),
            cart_line(price="free"),
            cart_line(price="0"),
            cart_line(price="-5"),
        ],
    )
    def test_malformed_line_rejected(self, line):
        with pytest.raises(ValidationError) as excinfo:
            assemble(customer_info(), [cart_line(), line], QUOTE)
        assert excinfo.value.field == "cartLine"
        assert "Cart line 2" in str(excinfo.value)
