"""
Analysis Models

Value objects produced by the classification pipeline.

ARCHITECTURE: All objects are immutable and created fresh per call.
Nothing here is persisted by the core; callers own persistence.
"""

from dataclasses import dataclass, field
from typing import Optional

from mindease.domain.enums.labels import Emotion, Intent, Sentiment
from mindease.domain.enums.severity import Severity

LOCAL_RULES_SOURCE = "local_rules"


@dataclass(frozen=True)
class SeverityVerdict:
    """
    Output of the severity classifier.

    Attributes:
        severity: Highest tier matched
        matched_indicators: Phrases matched in that tier only
    """

    severity: Severity = Severity.NORMAL
    matched_indicators: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_crisis(self) -> bool:
        return self.severity == Severity.CRISIS


@dataclass(frozen=True)
class EmotionOutcome:
    """
    Output of an emotion source.

    Carries a structured fallback channel so callers and tests can
    see that remote enrichment was abandoned without scraping logs.

    Attributes:
        emotion: Selected emotion
        confidence: Remote top-label score, 0.0 for rule-based results
        sentiment_override: Independent remote sentiment, if any
        source: Name of the source that produced the emotion
        fallback_used: Whether a remote failure forced local rules
        fallback_reason: Short machine-readable failure reason
    """

    emotion: Emotion = Emotion.NEUTRAL
    confidence: float = 0.0
    sentiment_override: Optional[Sentiment] = None
    source: str = LOCAL_RULES_SOURCE
    fallback_used: bool = False
    fallback_reason: Optional[str] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be in [0, 1], got {self.confidence}")

    @property
    def from_remote(self) -> bool:
        """Whether a remote model supplied the emotion."""
        return self.source != LOCAL_RULES_SOURCE


@dataclass(frozen=True)
class AnalysisResult:
    """
    Structured classification of one utterance.

    Attributes:
        emotion: Dominant emotion
        sentiment: Coarse polarity
        severity: Crisis-risk severity (always rule-based)
        intent: Conversational intent (always rule-based)
        confidence: 0.0 for rule-based emotion, else remote top score
        enrichment_used: Whether the remote source supplied the emotion
        fallback_reason: Why enrichment or analysis degraded, if it did
    """

    emotion: Emotion = Emotion.NEUTRAL
    sentiment: Sentiment = Sentiment.NEUTRAL
    severity: Severity = Severity.NORMAL
    intent: Intent = Intent.GENERAL_CONVERSATION
    confidence: float = 0.0
    enrichment_used: bool = False
    fallback_reason: Optional[str] = None

    @property
    def degraded(self) -> bool:
        """Whether any fallback path was taken."""
        return self.fallback_reason is not None

    def classification(self) -> tuple[Emotion, Sentiment, Severity, Intent]:
        """Label tuple, excluding confidence and diagnostics."""
        return (self.emotion, self.sentiment, self.severity, self.intent)

    def to_dict(self) -> dict:
        """Serialize to plain data for the UI layer."""
        return {
            "emotion": self.emotion.value,
            "sentiment": self.sentiment.value,
            "severity": self.severity.label,
            "intent": self.intent.value,
            "confidence": round(self.confidence, 4),
        }
