"""
Classification Label Enumerations

Closed label sets produced by the classifiers.
"""

from enum import StrEnum


class Emotion(StrEnum):
    """
    Dominant affect label. Exactly one per utterance.

    Declaration order is the local classifier's tie-break precedence.
    """

    SADNESS = "sadness"
    JOY = "joy"
    ANGER = "anger"
    FEAR = "fear"
    ANXIETY = "anxiety"
    LONELINESS = "loneliness"
    STRESS = "stress"
    CONFUSION = "confusion"
    LOVE = "love"
    DISGUST = "disgust"
    SURPRISE = "surprise"
    NEUTRAL = "neutral"


class Sentiment(StrEnum):
    """Coarse polarity derived from emotion."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Intent(StrEnum):
    """
    Conversational purpose of an utterance.

    Declaration order is match priority; GENERAL_CONVERSATION is the fallback.
    """

    ASK_ADVICE = "ask_advice"
    VENTING = "venting"
    SEEKING_SUPPORT = "seeking_support"
    GENERAL_CONVERSATION = "general_conversation"
