"""Unit tests for form tokenizing and validation utilities.

Tests the newline/comma tokenizing rule, field length limits and
per-field item count limits. Settings are mocked so limits are explicit.
"""

import pytest
from unittest.mock import patch, MagicMock

from blueprint_engine.exceptions import InputValidationError
from blueprint_engine.utils.validation import (
    tokenize,
    tokenize_field,
    validate_field_length,
    validate_item_count,
)


def _make_settings(**overrides):
    """Create a mock Settings object with sensible defaults."""
    defaults = {
        "max_field_length": 4000,
        "max_items_per_field": 50,
    }
    defaults.update(overrides)
    settings = MagicMock()
    for k, v in defaults.items():
        setattr(settings, k, v)
    return settings


# We patch get_settings at the module level so every call inside
# blueprint_engine.utils.validation uses our mock instead of the real config.
SETTINGS_PATH = "blueprint_engine.utils.validation.get_settings"


class TestTokenize:
    def test_splits_on_newlines(self):
        assert tokenize("a\nb\nc") == ["a", "b", "c"]

    def test_splits_on_commas(self):
        assert tokenize("a, b,c") == ["a", "b", "c"]

    def test_splits_on_crlf(self):
        assert tokenize("a\r\nb") == ["a", "b"]

    def test_mixed_separators_preserve_order(self):
        assert tokenize("third\nfirst, second") == ["third", "first", "second"]

    def test_discards_empty_pieces(self):
        assert tokenize("a,,\n\n  ,b\n") == ["a", "b"]

    def test_trims_pieces(self):
        assert tokenize("   spaced   \n\tTabbed\t") == ["spaced", "Tabbed"]

    def test_empty_and_none(self):
        assert tokenize("") == []
        assert tokenize(None) == []

    def test_does_not_dedupe(self):
        assert tokenize("a\na") == ["a", "a"]


class TestFieldLength:
    def test_within_limit_passes(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_field_length=10)):
            assert validate_field_length("name", "short") == "short"

    def test_over_limit_rejected(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_field_length=10)):
            with pytest.raises(InputValidationError) as exc_info:
                validate_field_length("name", "x" * 11)
        assert exc_info.value.details == {"field": "name", "length": 11}

    def test_exact_limit_passes(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_field_length=5)):
            assert validate_field_length("name", "abcde") == "abcde"


class TestItemCount:
    def test_within_limit_passes(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_items_per_field=3)):
            assert validate_item_count("goals", ["a", "b", "c"]) == ["a", "b", "c"]

    def test_over_limit_rejected(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_items_per_field=2)):
            with pytest.raises(InputValidationError) as exc_info:
                validate_item_count("goals", ["a", "b", "c"])
        assert exc_info.value.error_code == "ERR_INPUT_001"


class TestTokenizeField:
    def test_tokenizes_valid_text(self):
        with patch(SETTINGS_PATH, return_value=_make_settings()):
            assert tokenize_field("team", "PM\nEngineer") == ["PM", "Engineer"]

    def test_counts_items_after_tokenizing(self):
        """Empty pieces do not count toward the item limit."""
        with patch(SETTINGS_PATH, return_value=_make_settings(max_items_per_field=2)):
            assert tokenize_field("team", "a,,,\n\nb") == ["a", "b"]

    def test_too_many_items_rejected(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_items_per_field=2)):
            with pytest.raises(InputValidationError):
                tokenize_field("team", "a,b,c")
