"""
Lexicon Store

Immutable keyword/phrase tables for severity tiers, emotions and intents.

Phrases are matched as case-insensitive substrings of normalized text.
There is no tokenization or word-boundary handling, so "die" also
matches "diesel". Recall is preferred over precision on the crisis path.

CLINICAL_REVIEW_REQUIRED: All phrase lists should be reviewed by
mental health professionals before production use.
"""

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional, Union

from mindease.domain.enums.labels import Emotion, Intent
from mindease.domain.enums.severity import Severity

LexiconCategory = Union[Severity, Emotion, Intent]

_WHITESPACE = re.compile(r"\s+")
_CURLY_APOSTROPHES = str.maketrans({"’": "'", "‘": "'"})


# SAFETY_CRITICAL: Any match here produces a CRISIS verdict
CRISIS_PHRASES: tuple[str, ...] = (
    "suicide",
    "suicidal",
    "kill myself",
    "end it all",
    "end my life",
    "take my life",
    "no point",
    "don't want to live",
    "want to hurt myself",
    "hurt myself",
    "harm myself",
    "self harm",
    "self-harm",
    "i should die",
    "i want to die",
    "better off dead",
)

MODERATE_PHRASES: tuple[str, ...] = (
    "tired of living",
    "life is meaningless",
    "hopeless",
    "useless",
    "don't care anymore",
    "don't want to exist",
    "pain too much",
    "can't take it",
    "devastated",
    "desperate",
    "severe depression",
    "depressed",
    "panic attack",
    "overwhelmed",
    "broken",
)

# Declaration order is the tie-break order: first emotion with a hit wins
EMOTION_PHRASES: dict[Emotion, tuple[str, ...]] = {
    Emotion.SADNESS: (
        "sad", "unhappy", "down", "crying", "heartbroken",
        "miserable", "depressed", "grief",
    ),
    Emotion.JOY: (
        "happy", "great", "glad", "excited", "wonderful",
        "amazing", "best day", "joy",
    ),
    Emotion.ANGER: (
        "angry", "mad", "furious", "frustrated", "annoyed", "hate", "rage",
    ),
    Emotion.FEAR: (
        "afraid", "scared", "worried", "terrified", "frightened", "fear",
    ),
    Emotion.ANXIETY: (
        "anxious", "anxiety", "nervous", "panic", "on edge", "uneasy",
    ),
    Emotion.LONELINESS: (
        "lonely", "alone", "isolated", "no friends", "nobody cares",
    ),
    Emotion.STRESS: (
        "stressed", "stress", "pressure", "burnt out", "burned out", "deadline",
    ),
    Emotion.CONFUSION: (
        "confused", "confusing", "don't understand", "unsure", "puzzled",
    ),
    Emotion.LOVE: (
        "love", "adore", "cherish",
    ),
    Emotion.DISGUST: (
        "disgusted", "disgusting", "gross", "repulsed", "sickening",
    ),
    Emotion.SURPRISE: (
        "surprised", "shocked", "unexpected", "can't believe",
    ),
}

INTENT_PHRASES: dict[Intent, tuple[str, ...]] = {
    Intent.ASK_ADVICE: (
        "what should i do", "how can i", "how do i", "should i",
        "advice", "tips", "suggest", "any ideas",
    ),
    Intent.VENTING: (
        "vent", "rant", "just need to say", "just want to say",
        "get this off my chest", "let it out", "fed up",
    ),
    Intent.SEEKING_SUPPORT: (
        "i need help", "help me", "need support", "support",
        "someone to talk to", "i need someone", "can you help", "listen to me",
    ),
}

# Match priority, independent of mapping order
INTENT_PRIORITY: tuple[Intent, ...] = (
    Intent.ASK_ADVICE,
    Intent.VENTING,
    Intent.SEEKING_SUPPORT,
)


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for phrase matching.

    Lower-cases, trims, collapses whitespace and folds curly
    apostrophes. None becomes the empty string.
    """
    if not text:
        return ""
    text = text.translate(_CURLY_APOSTROPHES)
    return _WHITESPACE.sub(" ", text.strip()).lower()


def find_phrases(normalized_text: str, phrases: Iterable[str]) -> list[str]:
    """
    Find every phrase that occurs in the text.

    Args:
        normalized_text: Text already passed through normalize_text
        phrases: Candidate phrases in declared order

    Returns:
        Matched phrases, in declared order
    """
    if not normalized_text:
        return []
    return [phrase for phrase in phrases if phrase in normalized_text]


def _freeze(phrases: Iterable[str]) -> tuple[str, ...]:
    frozen = []
    for phrase in phrases:
        cleaned = normalize_text(phrase)
        if not cleaned:
            raise ValueError("Lexicon phrases must be non-empty")
        if cleaned not in frozen:
            frozen.append(cleaned)
    return tuple(frozen)


class LexiconStore:
    """
    Read-only phrase tables keyed by category.

    Construct once at startup and inject into classifiers. Use
    with_overrides() to derive a store with replaced tables.

    Usage:
        lexicon = LexiconStore.default()
        lexicon.lookup(Severity.CRISIS)
        lexicon.lookup(Emotion.JOY)
    """

    def __init__(
        self,
        crisis_phrases: Iterable[str] = (),
        moderate_phrases: Iterable[str] = (),
        emotion_phrases: Optional[Mapping[Emotion, Iterable[str]]] = None,
        intent_phrases: Optional[Mapping[Intent, Iterable[str]]] = None,
    ) -> None:
        emotion_phrases = emotion_phrases or {}
        intent_phrases = intent_phrases or {}

        if Emotion.NEUTRAL in emotion_phrases:
            raise ValueError("neutral is the fallback emotion and takes no phrases")
        if Intent.GENERAL_CONVERSATION in intent_phrases:
            raise ValueError("general_conversation is the fallback intent and takes no phrases")

        self._severity = MappingProxyType({
            Severity.CRISIS: _freeze(crisis_phrases),
            Severity.MODERATE: _freeze(moderate_phrases),
        })
        self._emotions = MappingProxyType({
            Emotion(emotion): _freeze(phrases)
            for emotion, phrases in emotion_phrases.items()
        })
        self._intents = MappingProxyType({
            Intent(intent): _freeze(phrases)
            for intent, phrases in intent_phrases.items()
        })

    @classmethod
    def default(cls) -> "LexiconStore":
        """Build the store from the built-in tables."""
        return cls(
            crisis_phrases=CRISIS_PHRASES,
            moderate_phrases=MODERATE_PHRASES,
            emotion_phrases=EMOTION_PHRASES,
            intent_phrases=INTENT_PHRASES,
        )

    def with_overrides(
        self,
        crisis_phrases: Optional[Iterable[str]] = None,
        moderate_phrases: Optional[Iterable[str]] = None,
        emotion_phrases: Optional[Mapping[Emotion, Iterable[str]]] = None,
        intent_phrases: Optional[Mapping[Intent, Iterable[str]]] = None,
    ) -> "LexiconStore":
        """
        Return a new store with the given tables replaced.

        Emotion and intent mappings replace the whole table, so the
        override also defines emotion tie-break order.
        """
        return LexiconStore(
            crisis_phrases=(
                self._severity[Severity.CRISIS] if crisis_phrases is None else crisis_phrases
            ),
            moderate_phrases=(
                self._severity[Severity.MODERATE] if moderate_phrases is None else moderate_phrases
            ),
            emotion_phrases=self._emotions if emotion_phrases is None else emotion_phrases,
            intent_phrases=self._intents if intent_phrases is None else intent_phrases,
        )

    def lookup(self, category: LexiconCategory) -> tuple[str, ...]:
        """
        Get the ordered phrase list for a category.

        Severity.NORMAL, Emotion.NEUTRAL and Intent.GENERAL_CONVERSATION
        are fallbacks and always return an empty tuple.
        """
        if isinstance(category, Severity):
            return self._severity.get(category, ())
        if isinstance(category, Emotion):
            return self._emotions.get(category, ())
        if isinstance(category, Intent):
            return self._intents.get(category, ())
        raise TypeError(f"Unsupported lexicon category: {category!r}")

    @property
    def emotion_order(self) -> tuple[Emotion, ...]:
        """Emotions with phrase lists, in tie-break order."""
        return tuple(self._emotions.keys())

    @property
    def intent_order(self) -> tuple[Intent, ...]:
        """Intents with phrase lists, in match priority."""
        return tuple(intent for intent in INTENT_PRIORITY if intent in self._intents)


_DEFAULT_STORE: Optional[LexiconStore] = None


def get_default_lexicon() -> LexiconStore:
    """Get the process-wide default lexicon, building it on first use."""
    global _DEFAULT_STORE
    if _DEFAULT_STORE is None:
        _DEFAULT_STORE = LexiconStore.default()
    return _DEFAULT_STORE
