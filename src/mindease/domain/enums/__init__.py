"""Domain enums package."""

from mindease.domain.enums.labels import Emotion, Intent, Sentiment
from mindease.domain.enums.severity import Severity

__all__ = ["Emotion", "Intent", "Sentiment", "Severity"]
