"""
Intent Classifier

Infers the conversational purpose of an utterance from phrasing.
Always local; never delegated to the enrichment source.
"""

from typing import Optional

from mindease.domain.enums.labels import Intent
from mindease.services.lexicon.lexicon_store import (
    LexiconStore,
    get_default_lexicon,
    normalize_text,
)


class IntentClassifier:
    """
    Ordered pattern-category intent classifier.

    First matching category wins, in priority:
    ask_advice > venting > seeking_support. No match falls back
    to general_conversation.
    """

    def __init__(self, lexicon: Optional[LexiconStore] = None) -> None:
        self._lexicon = lexicon or get_default_lexicon()

    def classify(self, text: Optional[str]) -> Intent:
        normalized = normalize_text(text)
        if not normalized:
            return Intent.GENERAL_CONVERSATION

        for intent in self._lexicon.intent_order:
            if any(phrase in normalized for phrase in self._lexicon.lookup(intent)):
                return intent

        return Intent.GENERAL_CONVERSATION
