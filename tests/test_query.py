"""
Tests for ingredient query sanitizing and parsing.
"""

import pytest

from recipes.query import parse_ingredient_query, sanitize_query


class TestSanitizeQuery:
    """Test cases for sanitize_query."""

    def test_removes_invalid_characters(self):
        """Test that spaces, digits and punctuation are dropped."""
        assert sanitize_query("  +Eggs, -Onions!! ") == "+Eggs,-Onions"

    def test_keeps_letters_plus_comma_and_minus(self):
        """Test that the allowed alphabet passes through unchanged."""
        assert sanitize_query("+eggs,-onions,flour") == "+eggs,-onions,flour"

    def test_drops_digits(self):
        """Test that digits are removed, not rejected."""
        assert sanitize_query("2 eggs") == "eggs"

    def test_drops_non_ascii_letters(self):
        """Test that accented letters are outside the allowed alphabet."""
        assert sanitize_query("jalapeño") == "jalapeo"

    @pytest.mark.parametrize("raw", ["", "   ", "!!!", "123"])
    def test_empty_after_sanitizing(self, raw):
        """Test that inputs with nothing valid sanitize to an empty string."""
        assert sanitize_query(raw) == ""

    def test_none_is_empty(self):
        """Test that None is treated as an empty query."""
        assert sanitize_query(None) == ""

    @pytest.mark.parametrize("raw", ["  +Eggs, -Onions!! ", "a b c", " -x,+y ", "tomato; DROP TABLE"])
    def test_idempotent(self, raw):
        """Test that sanitizing twice gives the same result as once."""
        once = sanitize_query(raw)
        assert sanitize_query(once) == once

    def test_output_alphabet(self):
        """Test that the output only contains [a-zA-Z+,-]."""
        result = sanitize_query("Eggs & Ham (2x), 100% -butter_+milk\t\n")
        assert result == "EggsHamx,-butter+milk"
        assert all(c.isascii() and (c.isalpha() or c in "+,-") for c in result)


class TestParseIngredientQuery:
    """Test cases for the inclusion/exclusion syntax."""

    def test_splits_required_excluded_and_plain_terms(self):
        """Test that + and - prefixes are recognized and terms lowercased."""
        query = parse_ingredient_query("+Eggs,-onions,flour")
        assert query.required == ["eggs"]
        assert query.excluded == ["onions"]
        assert query.terms == ["flour"]

    def test_parses_raw_input(self):
        """Test that raw input is sanitized before parsing."""
        query = parse_ingredient_query(" + eggs , - onions ")
        assert query.required == ["eggs"]
        assert query.excluded == ["onions"]

    def test_empty_query(self):
        """Test that an empty query parses to nothing and matches everything."""
        query = parse_ingredient_query("")
        assert query.is_empty
        assert query.matches("anything, at, all")

    def test_bare_prefixes_are_ignored(self):
        """Test that a lone + or - carries no term."""
        query = parse_ingredient_query("+,-,eggs")
        assert query.required == []
        assert query.excluded == []
        assert query.terms == ["eggs"]

    def test_required_terms_must_all_match(self):
        """Test that every required term must be present."""
        query = parse_ingredient_query("+eggs,+milk")
        assert query.matches("eggs, milk, flour")
        assert not query.matches("eggs, flour")

    def test_excluded_terms_must_be_absent(self):
        """Test that an excluded ingredient rejects the recipe."""
        query = parse_ingredient_query("+eggs,-onions")
        assert query.matches("eggs, tomatoes")
        assert not query.matches("eggs, red onions")

    def test_plain_terms_match_any(self):
        """Test that plain terms alone need at least one hit."""
        query = parse_ingredient_query("rice,flour")
        assert query.matches("flour, butter")
        assert not query.matches("pasta, butter")
