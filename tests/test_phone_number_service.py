"""
Unit Tests for Phone Number Service

Run with: pytest tests/test_phone_number_service.py -v
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from services.phone_number_service import format_phone_number


class TestFormatPhoneNumber:
    """Test +38 normalization."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_null_or_blank_returned_as_is(self, value):
        assert format_phone_number(value) == value

    def test_separators_removed_and_prefix_added(self):
        assert format_phone_number("123-456-7890") == "+381234567890"

    def test_ten_digits_get_prefix(self):
        assert format_phone_number("0501234567") == "+380501234567"

    def test_existing_plus_preserved(self):
        assert format_phone_number("+380501234567") == "+380501234567"

    def test_too_short_returned_unchanged(self):
        assert format_phone_number("12345") == "12345"

    def test_too_long_returned_unchanged(self):
        assert format_phone_number("12345678901234") == "12345678901234"

    def test_spaces_and_brackets_removed(self):
        assert format_phone_number("+38 (050) 123-45-67") == "+380501234567"

    def test_country_code_without_plus_unchanged(self):
        """12 digits without '+' are not touched."""
        assert format_phone_number("380501234567") == "380501234567"

    def test_unchanged_input_keeps_separators(self):
        """When no rule applies the original text comes back, not the digits."""
        assert format_phone_number("12-34-5") == "12-34-5"
