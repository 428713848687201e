from leumicard.providers.base import PaymentGateway
from leumicard.providers.leumicard import LeumiCardGateway

__all__ = ["PaymentGateway", "LeumiCardGateway"]
