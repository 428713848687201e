"""
Request parameter marshaling for Leumi Card operations.

Each operation context is an immutable snapshot of one operation's domain
inputs and knows how to render itself as the flat query-parameter mapping
the provider expects:

  - Sale:      terminal, action=soft, card, holder, customer, deal, amount
  - Authorize: the sale mapping plus Postpone=True
  - Capture:   terminal, action=commitTrans, transaction id

The gateway sends these mappings and the test driver matches on them, so
both sides always agree on the wire fields.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from leumicard.models.domain import CreditCard, CurrencyAmount, Customer, Deal, require
from leumicard.models.enums import Action, RequestFields, ResponseCode

POSTPONE_FLAG = "True"
SINGLE_INSTALLMENT = "1"


def format_amount(amount: float) -> str:
    """Render an amount the way the provider reads it (33.3 -> "33.3", 10 -> "10.0")."""
    return str(float(amount))


class RequestContext(ABC):
    """An operation that can be expressed as provider query parameters."""

    # CCode the provider answers with when this operation is approved
    approved_code: ClassVar[ResponseCode] = ResponseCode.APPROVED

    @abstractmethod
    def as_request_params(self) -> dict[str, str]:
        ...


@dataclass(frozen=True)
class SaleContext(RequestContext):
    masof: str
    currency_amount: CurrencyAmount
    credit_card: CreditCard
    customer: Customer
    deal: Deal

    def as_request_params(self) -> dict[str, str]:
        """
        Build the sale mapping.

        Raises:
            MissingFieldError: If holder id, CSC, customer name or deal title
                is absent. The provider has no meaning for an empty value.
        """
        card = self.credit_card
        return {
            RequestFields.MASOF.value: self.masof,
            RequestFields.ACTION.value: Action.SOFT.value,
            RequestFields.USER_ID.value: require(card.holder_id, "credit_card.holder_id"),
            RequestFields.CLIENT_NAME.value: require(self.customer.first_name, "customer.first_name"),
            RequestFields.CLIENT_LAST_NAME.value: require(self.customer.last_name, "customer.last_name"),
            RequestFields.INFO_PURCHASE_DESC.value: require(self.deal.title, "deal.title"),
            RequestFields.AMOUNT.value: format_amount(self.currency_amount.amount),
            RequestFields.CREDIT_CARD.value: card.number,
            RequestFields.CVV.value: require(card.csc, "credit_card.csc"),
            RequestFields.EXP_MONTH.value: str(card.expiration.month),
            RequestFields.EXP_YEAR.value: str(card.expiration.year),
            RequestFields.INSTALLMENTS.value: SINGLE_INSTALLMENT,
        }


@dataclass(frozen=True)
class AuthorizeContext(RequestContext):
    masof: str
    currency_amount: CurrencyAmount
    credit_card: CreditCard
    customer: Customer
    deal: Deal

    approved_code: ClassVar[ResponseCode] = ResponseCode.APPROVED_POSTPONED

    def as_request_params(self) -> dict[str, str]:
        sale = SaleContext(self.masof, self.currency_amount, self.credit_card, self.customer, self.deal)
        params = sale.as_request_params()
        params[RequestFields.POSTPONE.value] = POSTPONE_FLAG
        return params


@dataclass(frozen=True)
class CaptureContext(RequestContext):
    masof: str
    currency_amount: Optional[CurrencyAmount]
    authorization_key: str  # Provider transaction id of the postponed sale

    def as_request_params(self) -> dict[str, str]:
        # Amount is not part of the commit request
        return {
            RequestFields.MASOF.value: self.masof,
            RequestFields.ACTION.value: Action.COMMIT_TRANS.value,
            RequestFields.TRANSACTION_ID.value: self.authorization_key,
        }
