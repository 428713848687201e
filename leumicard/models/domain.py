"""
Domain value types consumed by the Leumi Card gateway and driver.

These mirror the platform's payment model: a credit card with optional
fields, a customer, a deal, and a currency amount. Optional fields stay
optional here; the wire format decides which of them are required, and
`require` is the accessor it uses to insist on them.
"""

from dataclasses import dataclass
from typing import Optional, TypeVar

from leumicard.errors import MissingFieldError

T = TypeVar("T")


def require(value: Optional[T], field: str) -> T:
    """Return `value`, or raise MissingFieldError if it is absent."""
    if value is None:
        raise MissingFieldError(field)
    return value


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: int


@dataclass(frozen=True)
class CreditCardOptionalFields:
    csc: Optional[str] = None
    holder_id: Optional[str] = None
    holder_name: Optional[str] = None


@dataclass(frozen=True)
class CreditCard:
    """A card as entered by the buyer. Only number and expiration are mandatory."""

    number: str
    expiration: YearMonth
    additional_fields: Optional[CreditCardOptionalFields] = None

    @property
    def csc(self) -> Optional[str]:
        return self.additional_fields.csc if self.additional_fields else None

    @property
    def holder_id(self) -> Optional[str]:
        return self.additional_fields.holder_id if self.additional_fields else None

    @property
    def holder_name(self) -> Optional[str]:
        return self.additional_fields.holder_name if self.additional_fields else None


@dataclass(frozen=True)
class Name:
    first: str
    last: str


@dataclass(frozen=True)
class Customer:
    name: Optional[Name] = None
    email: Optional[str] = None
    ip_address: Optional[str] = None

    @property
    def first_name(self) -> Optional[str]:
        return self.name.first if self.name else None

    @property
    def last_name(self) -> Optional[str]:
        return self.name.last if self.name else None


@dataclass(frozen=True)
class Deal:
    id: str
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class CurrencyAmount:
    currency: str  # ISO 4217
    amount: float


@dataclass(frozen=True)
class Payment:
    currency_amount: CurrencyAmount
    installments: int = 1
