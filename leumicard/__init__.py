"""Leumi Card payment gateway client and test driver."""

from leumicard.errors import InvalidKeyError, MissingFieldError, PaymentError, PaymentRejectedError
from leumicard.providers.leumicard import LeumiCardGateway

__all__ = [
    "InvalidKeyError",
    "LeumiCardGateway",
    "MissingFieldError",
    "PaymentError",
    "PaymentRejectedError",
]
