"""Detection services package."""

from mindease.services.detection.emotion_classifier import (
    EmotionClassifier,
    EmotionSource,
    LocalRuleSource,
    RemoteEnrichedSource,
)
from mindease.services.detection.intent_classifier import IntentClassifier
from mindease.services.detection.sentiment_deriver import SentimentDeriver
from mindease.services.detection.severity_classifier import SeverityClassifier

__all__ = [
    "EmotionClassifier",
    "EmotionSource",
    "LocalRuleSource",
    "RemoteEnrichedSource",
    "IntentClassifier",
    "SentimentDeriver",
    "SeverityClassifier",
]
