"""
Test double for the Leumi Card HTTP API.

Usage in a test:

    driver = LeumiCardDriver(port=10019)
    driver.start()

    driver.reset()
    driver.a_sale_for(masof, amount, card, customer, deal).succeeds_with("4638202")
    # ... call the gateway against http://localhost:10019/ ...

    driver.stop()

`succeeds_with` only answers GETs whose query contains every parameter of
the operation (extras are fine). `errors`, `is_rejected` and
`returns_illegal_masof` answer any GET, so register them alone after a
reset. Every answer is HTTP 200; the outcome is in the body.
"""

import logging
from typing import Optional

from fastapi import Request, Response
from fastapi.responses import HTMLResponse

from leumicard.models.domain import CreditCard, CurrencyAmount, Customer, Deal
from leumicard.models.enums import RequestFields, ResponseCode, ResponseFields
from leumicard.protocol.request_builder import (
    AuthorizeContext,
    CaptureContext,
    RequestContext,
    SaleContext,
)
from leumicard.protocol.response_parser import format_response
from leumicard.testkit.probe import EmbeddedHttpProbe

logger = logging.getLogger("leumicard.testkit.driver")

CANNED_AMOUNT = "1000"
NO_TRANSACTION = "0"


def canned_response(code: ResponseCode, transaction_id: str = NO_TRANSACTION) -> str:
    return format_response({
        ResponseFields.ID.value: transaction_id,
        ResponseFields.CCODE.value: code.value,
        ResponseFields.AMOUNT.value: CANNED_AMOUNT,
    })


def _html(body: str) -> Response:
    return HTMLResponse(content=body, status_code=200)


class RequestExpectation:
    """One operation the driver can be told how to answer."""

    def __init__(self, probe: EmbeddedHttpProbe, context: RequestContext, password: Optional[str] = None):
        self._probe = probe
        self.context = context
        self._password = password

    def as_request_params(self) -> dict[str, str]:
        return self.context.as_request_params()

    def successful_response(self, transaction_id: str) -> str:
        return canned_response(self.context.approved_code, transaction_id)

    def fail_response(self) -> str:
        return canned_response(ResponseCode.FAILURE)

    def reject_response(self) -> str:
        return canned_response(ResponseCode.REJECTED)

    def illegal_masof_response(self) -> str:
        return canned_response(ResponseCode.ILLEGAL_MASOF)

    def succeeds_with(self, transaction_id: str) -> None:
        expected = self.as_request_params()
        if self._password is not None:
            expected[RequestFields.PASSWORD.value] = self._password
        body = self.successful_response(transaction_id)

        def handler(request: Request) -> Optional[Response]:
            if request.method == "GET" and _contains_all(request, expected):
                return _html(body)
            return None

        self._probe.handlers.append(handler)
        logger.debug("Stubbed %s -> Id=%s", type(self.context).__name__, transaction_id)

    def errors(self) -> None:
        self._answer_any_get(self.fail_response())

    def is_rejected(self) -> None:
        self._answer_any_get(self.reject_response())

    gets_rejected = is_rejected

    def returns_illegal_masof(self) -> None:
        self._answer_any_get(self.illegal_masof_response())

    def _answer_any_get(self, body: str) -> None:
        def handler(request: Request) -> Optional[Response]:
            if request.method == "GET":
                return _html(body)
            return None

        self._probe.handlers.append(handler)
        logger.debug("Stubbed any GET -> %s", body)


def _contains_all(request: Request, expected: dict[str, str]) -> bool:
    query = request.query_params
    return all(value in query.getlist(key) for key, value in expected.items())


class LeumiCardDriver:
    """Stands in for the Leumi Card endpoint on a local port."""

    def __init__(self, port: int, password: Optional[str] = None, host: str = "127.0.0.1"):
        self.probe = EmbeddedHttpProbe(port, host=host)
        self.password = password

    @property
    def url(self) -> str:
        return f"http://{self.probe.host}:{self.probe.port}/"

    def start(self) -> None:
        self.probe.start()

    def stop(self) -> None:
        self.probe.stop()

    def reset(self) -> None:
        self.probe.handlers.clear()

    def an_authorize_for(
        self,
        masof: str,
        currency_amount: CurrencyAmount,
        credit_card: CreditCard,
        customer: Customer,
        deal: Deal,
    ) -> RequestExpectation:
        context = AuthorizeContext(masof, currency_amount, credit_card, customer, deal)
        return RequestExpectation(self.probe, context, self.password)

    def a_sale_for(
        self,
        masof: str,
        currency_amount: CurrencyAmount,
        credit_card: CreditCard,
        customer: Customer,
        deal: Deal,
    ) -> RequestExpectation:
        context = SaleContext(masof, currency_amount, credit_card, customer, deal)
        return RequestExpectation(self.probe, context, self.password)

    def a_capture_for(
        self,
        masof: str,
        currency_amount: CurrencyAmount,
        authorization_key: str,
    ) -> RequestExpectation:
        context = CaptureContext(masof, currency_amount, authorization_key)
        return RequestExpectation(self.probe, context, self.password)
