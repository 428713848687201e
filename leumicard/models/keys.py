"""
Merchant and authorization keys.

The platform stores per-merchant credentials and per-authorization state as
opaque JSON strings. For Leumi Card the merchant key carries the terminal
number (masof) and the authorization key carries the provider's transaction
id, which capture later commits.
"""

from pydantic import BaseModel, Field, ValidationError

from leumicard.errors import InvalidKeyError


class LeumiCardMerchant(BaseModel):
    masof: str

    model_config = {"frozen": True}


class LeumiCardAuthorization(BaseModel):
    transaction_id: str = Field(alias="transactionId")

    model_config = {"frozen": True, "populate_by_name": True}


class JsonLeumiCardMerchantParser:
    def parse(self, merchant_key: str) -> LeumiCardMerchant:
        try:
            return LeumiCardMerchant.model_validate_json(merchant_key)
        except ValidationError as e:
            raise InvalidKeyError(f"Invalid merchant key: {e.error_count()} error(s)") from e

    def stringify(self, merchant: LeumiCardMerchant) -> str:
        return merchant.model_dump_json()


class JsonLeumiCardAuthorizationParser:
    def parse(self, authorization_key: str) -> LeumiCardAuthorization:
        try:
            return LeumiCardAuthorization.model_validate_json(authorization_key)
        except ValidationError as e:
            raise InvalidKeyError(f"Invalid authorization key: {e.error_count()} error(s)") from e

    def stringify(self, authorization: LeumiCardAuthorization) -> str:
        return authorization.model_dump_json(by_alias=True)
