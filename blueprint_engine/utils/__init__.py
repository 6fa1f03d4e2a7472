"""유틸리티 모듈."""

from .text import (
    clean_text,
    clean_items,
    dedupe,
    has_content,
    meaningful,
    or_default,
    sentence,
    strip_sentence,
    lower_first,
    upper_first,
    human_join,
    split_terms,
    matches_keyword,
    contains_term,
    pick,
)
from .validation import (
    tokenize,
    tokenize_field,
    validate_field_length,
    validate_item_count,
)

__all__ = [
    "clean_text",
    "clean_items",
    "dedupe",
    "has_content",
    "meaningful",
    "or_default",
    "sentence",
    "strip_sentence",
    "lower_first",
    "upper_first",
    "human_join",
    "split_terms",
    "matches_keyword",
    "contains_term",
    "pick",
    "tokenize",
    "tokenize_field",
    "validate_field_length",
    "validate_item_count",
]
