"""
Leumi Card gateway client.

Every operation is a single GET against the provider endpoint with the
operation's parameters in the query string. The provider always answers
200; the outcome lives in the body's CCode:

  - 0    approved (sale, capture)
  - 800  approved and postponed (authorize)
  - 33   rejected by the issuer  -> PaymentRejectedError
  - else failure                 -> PaymentError

No retries: a failed call is reported to the caller as-is.
"""

import logging
from typing import Optional

import httpx

from leumicard.config import settings
from leumicard.errors import PaymentError, PaymentRejectedError
from leumicard.models.domain import CreditCard, Customer, Deal, Payment, require
from leumicard.models.enums import CURRENCY_CODES, RequestFields, ResponseCode
from leumicard.models.keys import (
    JsonLeumiCardAuthorizationParser,
    JsonLeumiCardMerchantParser,
    LeumiCardAuthorization,
)
from leumicard.protocol.request_builder import (
    AuthorizeContext,
    CaptureContext,
    RequestContext,
    SaleContext,
)
from leumicard.protocol.response_parser import LeumiCardResponse, parse_response
from leumicard.providers.base import PaymentGateway

logger = logging.getLogger("leumicard.gateway")

REJECTED_CODES = {ResponseCode.REJECTED.value}


def _currency_code(currency: str) -> str:
    try:
        return CURRENCY_CODES[currency.upper()]
    except KeyError:
        raise PaymentError(f"Unsupported currency: {currency}") from None


class LeumiCardGateway(PaymentGateway):
    """PaymentGateway backed by the Leumi Card HTTP API."""

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        password: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self._endpoint_url = endpoint_url if endpoint_url is not None else settings.endpoint_url
        self._password = password if password is not None else settings.password
        self._timeout = timeout_seconds if timeout_seconds is not None else settings.timeout_seconds
        self._merchant_parser = JsonLeumiCardMerchantParser()
        self._authorization_parser = JsonLeumiCardAuthorizationParser()

    @property
    def name(self) -> str:
        return "leumicard"

    async def sale(
        self,
        merchant_key: str,
        credit_card: CreditCard,
        payment: Payment,
        customer: Optional[Customer] = None,
        deal: Optional[Deal] = None,
    ) -> str:
        merchant = self._merchant_parser.parse(merchant_key)
        context = SaleContext(
            masof=merchant.masof,
            currency_amount=payment.currency_amount,
            credit_card=credit_card,
            customer=require(customer, "customer"),
            deal=require(deal, "deal"),
        )
        extra = {RequestFields.CURRENCY.value: _currency_code(payment.currency_amount.currency)}
        response = await self._execute("sale", context, extra)
        return response.transaction_id

    async def authorize(
        self,
        merchant_key: str,
        credit_card: CreditCard,
        payment: Payment,
        customer: Optional[Customer] = None,
        deal: Optional[Deal] = None,
    ) -> str:
        merchant = self._merchant_parser.parse(merchant_key)
        context = AuthorizeContext(
            masof=merchant.masof,
            currency_amount=payment.currency_amount,
            credit_card=credit_card,
            customer=require(customer, "customer"),
            deal=require(deal, "deal"),
        )
        extra = {RequestFields.CURRENCY.value: _currency_code(payment.currency_amount.currency)}
        response = await self._execute("authorize", context, extra)
        return self._authorization_parser.stringify(
            LeumiCardAuthorization(transaction_id=response.transaction_id)
        )

    async def capture(self, merchant_key: str, authorization_key: str, amount: float) -> str:
        """
        Commit a postponed transaction.

        The provider commits the full authorized amount: `amount` is only
        logged, never sent. Partial capture is not supported.
        """
        merchant = self._merchant_parser.parse(merchant_key)
        authorization = self._authorization_parser.parse(authorization_key)
        context = CaptureContext(
            masof=merchant.masof,
            currency_amount=None,
            authorization_key=authorization.transaction_id,
        )
        logger.info(
            "Capturing authorization | masof=%s transaction=%s amount=%s",
            merchant.masof,
            authorization.transaction_id,
            amount,
        )
        response = await self._execute("capture", context)
        return response.transaction_id

    async def _execute(
        self,
        operation: str,
        context: RequestContext,
        extra: Optional[dict[str, str]] = None,
    ) -> LeumiCardResponse:
        params = context.as_request_params()
        params[RequestFields.PASSWORD.value] = self._password
        if extra:
            params.update(extra)

        masof = params[RequestFields.MASOF.value]
        logger.info("Sending %s to Leumi Card | masof=%s", operation, masof)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                http_response = await client.get(self._endpoint_url, params=params)
                http_response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Leumi Card %s failed at transport level: %s", operation, e)
            raise PaymentError(f"Leumi Card {operation} request failed: {e}") from e

        response = parse_response(http_response.text)
        logger.info(
            "Leumi Card %s answered | masof=%s ccode=%s id=%s",
            operation,
            masof,
            response.code,
            response.transaction_id,
        )

        if response.code == context.approved_code.value:
            return response
        if response.code in REJECTED_CODES:
            raise PaymentRejectedError(
                f"Leumi Card rejected {operation} (CCode={response.code})", code=response.code
            )
        raise PaymentError(f"Leumi Card {operation} failed (CCode={response.code})", code=response.code)
