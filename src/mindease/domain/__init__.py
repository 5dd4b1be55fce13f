"""
MindEase Domain Layer

Immutable value objects and label enums exchanged between the
classification core and the chat UI.
"""

from mindease.domain.enums import Emotion, Intent, Sentiment, Severity
from mindease.domain.models import (
    AnalysisResult,
    CrisisDetection,
    EmotionOutcome,
    ResponseContext,
    ResponsePackage,
    SeverityVerdict,
)

__all__ = [
    # Enums
    "Emotion",
    "Intent",
    "Sentiment",
    "Severity",
    # Models
    "AnalysisResult",
    "CrisisDetection",
    "EmotionOutcome",
    "ResponseContext",
    "ResponsePackage",
    "SeverityVerdict",
]
