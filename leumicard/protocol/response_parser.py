"""
Parsing and rendering of the provider's response dialect.

The provider answers with an HTML-typed body holding a flat
`key=value&key=value` list, for example:

    Id=4638202&CCode=0&Amount=1000&ACode=&Fild1=&Fild2=&Fild3=

Empty values are meaningful (the field is present but blank), so they are
kept rather than dropped.
"""

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import parse_qsl

from leumicard.errors import PaymentError
from leumicard.models.enums import ResponseFields


@dataclass(frozen=True)
class LeumiCardResponse:
    transaction_id: str
    code: str
    amount: Optional[str] = None
    approval_code: Optional[str] = None
    raw: dict[str, str] = field(default_factory=dict)


def parse_response(body: str) -> LeumiCardResponse:
    """
    Parse a provider response body.

    Raises:
        PaymentError: If the body carries no CCode.
    """
    fields = dict(parse_qsl(body.strip(), keep_blank_values=True))
    code = fields.get(ResponseFields.CCODE.value)
    if code is None:
        raise PaymentError(f"Unexpected response from Leumi Card: {body[:200]!r}")

    return LeumiCardResponse(
        transaction_id=fields.get(ResponseFields.ID.value, ""),
        code=code,
        amount=fields.get(ResponseFields.AMOUNT.value),
        approval_code=fields.get(ResponseFields.ACODE.value),
        raw=fields,
    )


def format_response(values: dict[str, str]) -> str:
    """
    Render response fields in wire order; absent fields are sent blank.

    Values are written as-is. The provider does not encode them.
    """
    return "&".join(f"{name.value}={values.get(name.value, '')}" for name in ResponseFields)
