"""
Sentiment Deriver

Maps an emotion to coarse sentiment through a fixed table.
"""

from types import MappingProxyType
from typing import Union

from mindease.domain.enums.labels import Emotion, Sentiment
from mindease.domain.models.analysis import EmotionOutcome


EMOTION_SENTIMENT: MappingProxyType = MappingProxyType({
    Emotion.JOY: Sentiment.POSITIVE,
    Emotion.LOVE: Sentiment.POSITIVE,
    Emotion.SURPRISE: Sentiment.POSITIVE,
    Emotion.SADNESS: Sentiment.NEGATIVE,
    Emotion.ANGER: Sentiment.NEGATIVE,
    Emotion.FEAR: Sentiment.NEGATIVE,
    Emotion.DISGUST: Sentiment.NEGATIVE,
    Emotion.ANXIETY: Sentiment.NEGATIVE,
    Emotion.STRESS: Sentiment.NEGATIVE,
    Emotion.CONFUSION: Sentiment.NEGATIVE,
    Emotion.LONELINESS: Sentiment.NEGATIVE,
    Emotion.NEUTRAL: Sentiment.NEUTRAL,
})


class SentimentDeriver:
    """
    Pure emotion → sentiment mapping.

    Remote enrichment may supply an independent sentiment; resolve()
    prefers it, but derive() is always available as the fallback.
    """

    def derive(self, emotion: Union[Emotion, str]) -> Sentiment:
        """
        Derive sentiment from an emotion.

        Unknown emotion labels map to neutral.
        """
        try:
            key = Emotion(str(emotion).strip().lower())
        except ValueError:
            return Sentiment.NEUTRAL
        return EMOTION_SENTIMENT[key]

    def resolve(self, outcome: EmotionOutcome) -> Sentiment:
        """Final sentiment for an emotion outcome, honoring remote overrides."""
        if outcome.sentiment_override is not None:
            return outcome.sentiment_override
        return self.derive(outcome.emotion)
