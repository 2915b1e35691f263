"""Tests for phone number and currency formatting."""

import pytest

from client_helpers.utils.currency import CURRENCY_SYMBOLS
from client_helpers.utils.formatting import format_currency, format_phone_number


class TestFormatPhoneNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1234567890", "(123) 456-7890"),
            ("123-456-7890", "(123) 456-7890"),
            ("(123) 456 7890", "(123) 456-7890"),
            ("11234567890", "+1 (123) 456-7890"),
            ("+1 123 456 7890", "+1 (123) 456-7890"),
            ("919876543210", "+91 98765 43210"),
            ("+91-98765-43210", "+91 98765 43210"),
        ],
    )
    def test_known_shapes(self, raw: str, expected: str) -> None:
        assert format_phone_number(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["12345", "21234567890", "929876543210", "+44 20 7946 0958", "", "call me"],
    )
    def test_unknown_shapes_returned_unchanged(self, raw: str) -> None:
        assert format_phone_number(raw) == raw


class TestFormatCurrency:
    @pytest.mark.parametrize(
        ("code", "symbol"),
        [("USD", "$"), ("EUR", "€"), ("GBP", "£"), ("INR", "₹"), ("CHF", "CHF"), ("ZWL", "Z$")],
    )
    def test_known_codes(self, code: str, symbol: str) -> None:
        assert format_currency(code) == symbol

    @pytest.mark.parametrize("code", ["XYZ", "usd", ""])
    def test_unknown_code_returns_empty(self, code: str) -> None:
        assert format_currency(code) == ""

    def test_unknown_code_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING"):
            format_currency("XYZ")

        assert "currency.unknown_code" in caplog.text

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CURRENCY_SYMBOLS["XYZ"] = "?"  # type: ignore[index]

    def test_table_covers_all_codes(self) -> None:
        assert len(CURRENCY_SYMBOLS) == 59
        assert all(len(code) == 3 and code.isupper() for code in CURRENCY_SYMBOLS)
