"""
Exception hierarchy for Leumi Card payment operations.

Every failure surfaced by the gateway is a PaymentError. Rejections (the
issuer declined the card) get their own subclass so callers can tell a
declined card apart from a broken request or an unreachable provider.
"""

from typing import Optional


class PaymentError(Exception):
    """Base exception for Leumi Card payment failures."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code  # Provider CCode, when the provider answered


class PaymentRejectedError(PaymentError):
    """The provider answered, but declined the transaction."""


class MissingFieldError(PaymentError):
    """A field the wire format requires is absent from the domain input."""

    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidKeyError(PaymentError):
    """A merchant or authorization key could not be parsed."""
