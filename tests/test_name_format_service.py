"""
Unit Tests for Name Formatting Service

Run with: pytest tests/test_name_format_service.py -v
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from services.name_format_service import (
    abbreviated_from_full,
    capitalize,
    correct_name,
    full_name,
    short_name,
    shortest_from_full,
    shortest_name,
)


class TestNameForms:
    """Test display forms."""

    def test_full_name_order(self):
        """Last name first, patronymic last."""
        assert full_name("Іван", "Михайлович", "Василишин") == "Василишин Іван Михайлович"

    def test_full_name_skips_missing(self):
        assert full_name("Іван", None, "Василишин") == "Василишин Іван"
        assert full_name("Іван", None, None) == "Іван"

    def test_short_name(self):
        assert short_name("іван", "Василишин") == "Іван ВАСИЛИШИН"

    def test_shortest_name(self):
        assert shortest_name("іван", "василишин") == "І. Василишин"

    def test_shortest_from_full(self):
        assert shortest_from_full("Василишин Іван Михайлович") == "І. Василишин"
        assert shortest_from_full("Іван") == "Іван"
        assert shortest_from_full(None) is None

    def test_capitalize(self):
        assert capitalize("тарас") == "Тарас"
        assert capitalize("") == ""
        assert capitalize(None) is None


class TestAbbreviatedFromFull:
    """Test "Last F.P." form."""

    def test_none(self):
        assert abbreviated_from_full(None) is None

    def test_single_word(self):
        assert abbreviated_from_full("Іван") == "Іван"

    def test_two_words(self):
        assert abbreviated_from_full("Василишин Іван") == "Василишин І."

    def test_three_words(self):
        assert abbreviated_from_full("Василишин Іван Михайлович") == "Василишин І.М."


class TestCorrectName:
    """Test capitalization fixes."""

    def test_none(self):
        assert correct_name(None) is None

    @pytest.mark.parametrize("name", ["Іван-Василь", "Мустафа-огли", "Бахтіяр-огли"])
    def test_hyphenated_names_kept(self, name):
        assert correct_name(name) == name

    def test_hyphenated_name_capitalized(self):
        assert correct_name("іван-ВАСИЛЬ") == "Іван-Василь"

    @pytest.mark.parametrize("name", ["Да Море", "Да море"])
    def test_leading_particle_lowercased(self, name):
        assert correct_name(name) == "да Море"

    def test_words_capitalized(self):
        assert correct_name("ТАРАС шевченко") == "Тарас Шевченко"
