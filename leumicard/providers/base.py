"""
Abstract payment gateway interface.

A gateway turns the platform's payment operations into calls against one
card processor. Merchant and authorization keys are opaque strings whose
format belongs to the gateway.
"""

from abc import ABC, abstractmethod
from typing import Optional

from leumicard.models.domain import CreditCard, Customer, Deal, Payment


class PaymentGateway(ABC):
    """Abstract base class for card processing gateways."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Gateway identifier (e.g. 'leumicard')."""
        ...

    @abstractmethod
    async def sale(
        self,
        merchant_key: str,
        credit_card: CreditCard,
        payment: Payment,
        customer: Optional[Customer] = None,
        deal: Optional[Deal] = None,
    ) -> str:
        """
        Charge the card immediately.

        Returns:
            The provider's transaction id.

        Raises:
            PaymentRejectedError: The card was declined.
            PaymentError: Any other failure.
        """
        ...

    @abstractmethod
    async def authorize(
        self,
        merchant_key: str,
        credit_card: CreditCard,
        payment: Payment,
        customer: Optional[Customer] = None,
        deal: Optional[Deal] = None,
    ) -> str:
        """
        Authorize the amount without settling it.

        Returns:
            An authorization key to pass to `capture`.
        """
        ...

    @abstractmethod
    async def capture(self, merchant_key: str, authorization_key: str, amount: float) -> str:
        """Settle a previous authorization. Returns the transaction id."""
        ...
