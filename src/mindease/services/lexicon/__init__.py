"""Lexicon services package."""

from mindease.services.lexicon.lexicon_store import (
    LexiconCategory,
    LexiconStore,
    find_phrases,
    get_default_lexicon,
    normalize_text,
)

__all__ = [
    "LexiconCategory",
    "LexiconStore",
    "find_phrases",
    "get_default_lexicon",
    "normalize_text",
]
