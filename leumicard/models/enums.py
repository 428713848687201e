"""Enumerations for the Leumi Card wire vocabulary."""

from enum import Enum


class RequestFields(str, Enum):
    """Query parameter names the provider accepts."""

    MASOF = "Masof"
    ACTION = "action"
    USER_ID = "UserId"
    CLIENT_NAME = "ClientName"
    CLIENT_LAST_NAME = "ClientLName"
    INFO_PURCHASE_DESC = "Info"
    AMOUNT = "Amount"
    CREDIT_CARD = "CC"
    CVV = "CVV"
    EXP_MONTH = "Tmonth"
    EXP_YEAR = "Tyear"
    INSTALLMENTS = "Tash"
    POSTPONE = "Postpone"
    TRANSACTION_ID = "TransId"
    PASSWORD = "PassP"
    CURRENCY = "Coin"


class Action(str, Enum):
    """Values of the `action` request field."""

    SOFT = "soft"  # Sale, or authorize when combined with Postpone
    COMMIT_TRANS = "commitTrans"  # Capture a postponed transaction


class ResponseFields(str, Enum):
    """Keys of the provider's key=value response body, in wire order."""

    ID = "Id"
    CCODE = "CCode"
    AMOUNT = "Amount"
    ACODE = "ACode"
    FILD1 = "Fild1"
    FILD2 = "Fild2"
    FILD3 = "Fild3"


class ResponseCode(str, Enum):
    """CCode values the gateway and the driver know about."""

    APPROVED = "0"
    APPROVED_POSTPONED = "800"
    FAILURE = "6"
    REJECTED = "33"
    ILLEGAL_MASOF = "901"


# Provider currency codes (Coin)
CURRENCY_CODES = {
    "ILS": "1",
    "USD": "2",
    "EUR": "3",
    "GBP": "4",
}
