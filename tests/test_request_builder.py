"""Tests for request parameter marshaling."""

import pytest

from leumicard.errors import MissingFieldError
from leumicard.models.domain import (
    CreditCard,
    CreditCardOptionalFields,
    CurrencyAmount,
    Customer,
    Deal,
    YearMonth,
)
from leumicard.protocol.request_builder import AuthorizeContext, CaptureContext, SaleContext

from tests.constants import MASOF, TRANSACTION_ID


@pytest.fixture
def sale(payment, credit_card, customer, deal) -> SaleContext:
    return SaleContext(MASOF, payment.currency_amount, credit_card, customer, deal)


class TestSale:
    def test_mapping(self, sale):
        assert sale.as_request_params() == {
            "Masof": "012345678",
            "action": "soft",
            "UserId": "0123456",
            "ClientName": "John",
            "ClientLName": "Doe",
            "Info": "some deal title",
            "Amount": "33.3",
            "CC": "4580458045804580",
            "CVV": "123",
            "Tmonth": "12",
            "Tyear": "2020",
            "Tash": "1",
        }

    def test_whole_amount_keeps_decimal_point(self, payment, credit_card, customer, deal):
        sale = SaleContext(MASOF, CurrencyAmount("USD", 10), credit_card, customer, deal)
        assert sale.as_request_params()["Amount"] == "10.0"

    def test_deterministic(self, sale):
        assert sale.as_request_params() == sale.as_request_params()

    def test_missing_holder_id(self, payment, customer, deal):
        card = CreditCard("4580458045804580", YearMonth(2020, 12), CreditCardOptionalFields(csc="123"))
        sale = SaleContext(MASOF, payment.currency_amount, card, customer, deal)
        with pytest.raises(MissingFieldError) as exc:
            sale.as_request_params()
        assert exc.value.field == "credit_card.holder_id"

    def test_missing_optional_fields_entirely(self, payment, customer, deal):
        card = CreditCard("4580458045804580", YearMonth(2020, 12))
        sale = SaleContext(MASOF, payment.currency_amount, card, customer, deal)
        with pytest.raises(MissingFieldError):
            sale.as_request_params()

    def test_missing_csc(self, payment, customer, deal):
        card = CreditCard("4580458045804580", YearMonth(2020, 12), CreditCardOptionalFields(holder_id="0123456"))
        sale = SaleContext(MASOF, payment.currency_amount, card, customer, deal)
        with pytest.raises(MissingFieldError) as exc:
            sale.as_request_params()
        assert exc.value.field == "credit_card.csc"

    def test_missing_customer_name(self, payment, credit_card, deal):
        sale = SaleContext(MASOF, payment.currency_amount, credit_card, Customer(), deal)
        with pytest.raises(MissingFieldError) as exc:
            sale.as_request_params()
        assert exc.value.field == "customer.first_name"

    def test_missing_deal_title(self, payment, credit_card, customer):
        sale = SaleContext(MASOF, payment.currency_amount, credit_card, customer, Deal(id="1"))
        with pytest.raises(MissingFieldError) as exc:
            sale.as_request_params()
        assert exc.value.field == "deal.title"


class TestAuthorize:
    def test_sale_plus_postpone(self, sale, payment, credit_card, customer, deal):
        authorize = AuthorizeContext(MASOF, payment.currency_amount, credit_card, customer, deal)
        params = authorize.as_request_params()

        assert params.pop("Postpone") == "True"
        assert params == sale.as_request_params()

    def test_approved_code_is_postponed(self, payment, credit_card, customer, deal):
        authorize = AuthorizeContext(MASOF, payment.currency_amount, credit_card, customer, deal)
        assert authorize.approved_code.value == "800"


class TestCapture:
    def test_mapping(self, payment):
        capture = CaptureContext(MASOF, payment.currency_amount, TRANSACTION_ID)
        assert capture.as_request_params() == {
            "Masof": "012345678",
            "action": "commitTrans",
            "TransId": "4638202",
        }

    def test_amount_not_echoed(self, payment):
        capture = CaptureContext(MASOF, payment.currency_amount, TRANSACTION_ID)
        assert "Amount" not in capture.as_request_params()
