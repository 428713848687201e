from leumicard.testkit.driver import LeumiCardDriver, RequestExpectation, canned_response
from leumicard.testkit.probe import EmbeddedHttpProbe, not_found_handler

__all__ = [
    "EmbeddedHttpProbe",
    "LeumiCardDriver",
    "RequestExpectation",
    "canned_response",
    "not_found_handler",
]
