from leumicard.models.domain import (
    CreditCard,
    CreditCardOptionalFields,
    CurrencyAmount,
    Customer,
    Deal,
    Name,
    Payment,
    YearMonth,
    require,
)
from leumicard.models.enums import Action, RequestFields, ResponseCode, ResponseFields
from leumicard.models.keys import (
    JsonLeumiCardAuthorizationParser,
    JsonLeumiCardMerchantParser,
    LeumiCardAuthorization,
    LeumiCardMerchant,
)

__all__ = [
    "CreditCard",
    "CreditCardOptionalFields",
    "CurrencyAmount",
    "Customer",
    "Deal",
    "Name",
    "Payment",
    "YearMonth",
    "require",
    "Action",
    "RequestFields",
    "ResponseCode",
    "ResponseFields",
    "JsonLeumiCardAuthorizationParser",
    "JsonLeumiCardMerchantParser",
    "LeumiCardAuthorization",
    "LeumiCardMerchant",
]
