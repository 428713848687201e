"""Shared test fixtures."""

import pytest

from leumicard.models.domain import (
    CreditCard,
    CreditCardOptionalFields,
    CurrencyAmount,
    Customer,
    Deal,
    Name,
    Payment,
    YearMonth,
)
from leumicard.models.keys import JsonLeumiCardMerchantParser, LeumiCardMerchant
from leumicard.providers.leumicard import LeumiCardGateway
from leumicard.testkit.driver import LeumiCardDriver

from tests.constants import DRIVER_PORT, MASOF, PASSWORD


@pytest.fixture(scope="session")
def running_driver():
    driver = LeumiCardDriver(port=DRIVER_PORT, password=PASSWORD)
    driver.start()
    yield driver
    driver.stop()


@pytest.fixture
def driver(running_driver: LeumiCardDriver):
    """The session driver with no expectations registered."""
    running_driver.reset()
    return running_driver


@pytest.fixture
def gateway(running_driver: LeumiCardDriver) -> LeumiCardGateway:
    return LeumiCardGateway(endpoint_url=running_driver.url, password=PASSWORD, timeout_seconds=5.0)


@pytest.fixture
def merchant_key() -> str:
    return JsonLeumiCardMerchantParser().stringify(LeumiCardMerchant(masof=MASOF))


@pytest.fixture
def payment() -> Payment:
    return Payment(currency_amount=CurrencyAmount("USD", 33.3), installments=2)


@pytest.fixture
def credit_card() -> CreditCard:
    return CreditCard(
        "4580458045804580",
        YearMonth(2020, 12),
        CreditCardOptionalFields(csc="123", holder_id="0123456"),
    )


@pytest.fixture
def customer() -> Customer:
    return Customer(name=Name(first="John", last="Doe"))


@pytest.fixture
def deal() -> Deal:
    return Deal(id="1500000000000", title="some deal title")
