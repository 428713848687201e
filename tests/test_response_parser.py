"""Tests for the provider's key=value response dialect."""

import pytest

from leumicard.errors import PaymentError
from leumicard.protocol.response_parser import format_response, parse_response


class TestParseResponse:
    def test_approved(self):
        response = parse_response("Id=4638202&CCode=0&Amount=1000&ACode=&Fild1=&Fild2=&Fild3=")
        assert response.transaction_id == "4638202"
        assert response.code == "0"
        assert response.amount == "1000"
        assert response.approval_code == ""

    def test_blank_fields_are_kept(self):
        response = parse_response("Id=0&CCode=33&Amount=1000&ACode=&Fild1=&Fild2=&Fild3=")
        assert response.raw["Fild3"] == ""
        assert len(response.raw) == 7

    def test_trailing_newline(self):
        assert parse_response("Id=1&CCode=0\n").code == "0"

    def test_missing_ccode(self):
        with pytest.raises(PaymentError):
            parse_response("<html>Service unavailable</html>")


class TestFormatResponse:
    def test_wire_order_and_blanks(self):
        body = format_response({"CCode": "6", "Id": "0", "Amount": "1000"})
        assert body == "Id=0&CCode=6&Amount=1000&ACode=&Fild1=&Fild2=&Fild3="
