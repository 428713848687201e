from leumicard.protocol.request_builder import (
    AuthorizeContext,
    CaptureContext,
    RequestContext,
    SaleContext,
)
from leumicard.protocol.response_parser import LeumiCardResponse, format_response, parse_response

__all__ = [
    "AuthorizeContext",
    "CaptureContext",
    "RequestContext",
    "SaleContext",
    "LeumiCardResponse",
    "format_response",
    "parse_response",
]
