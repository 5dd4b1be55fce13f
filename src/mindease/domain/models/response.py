"""
Response Models

Input context and output package of the response selector.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping, Optional, TypeVar

from mindease.domain.enums.labels import Emotion, Intent, Sentiment
from mindease.domain.enums.severity import Severity
from mindease.domain.models.analysis import AnalysisResult

_LabelT = TypeVar("_LabelT", bound=StrEnum)


def _coerce_label(enum_cls: type[_LabelT], value: Any) -> _LabelT:
    if isinstance(value, enum_cls):
        return value
    return enum_cls(str(value).strip().lower())


@dataclass(frozen=True)
class ResponseContext:
    """
    Labels a reply is selected for.

    Fields accept enum members or their plain wire values ("crisis",
    2, "sadness"), so a context rebuilt from AnalysisResult.to_dict()
    selects the same reply as the original result.

    Raises:
        ValueError: If a label is not in its closed set
    """

    emotion: Emotion = Emotion.NEUTRAL
    sentiment: Sentiment = Sentiment.NEUTRAL
    intent: Intent = Intent.GENERAL_CONVERSATION
    severity: Severity = Severity.NORMAL

    def __post_init__(self) -> None:
        """Coerce plain values to their enums."""
        object.__setattr__(self, "emotion", _coerce_label(Emotion, self.emotion))
        object.__setattr__(self, "sentiment", _coerce_label(Sentiment, self.sentiment))
        object.__setattr__(self, "intent", _coerce_label(Intent, self.intent))
        object.__setattr__(self, "severity", Severity.coerce(self.severity))

    @classmethod
    def from_analysis(cls, analysis: AnalysisResult) -> "ResponseContext":
        return cls(
            emotion=analysis.emotion,
            sentiment=analysis.sentiment,
            intent=analysis.intent,
            severity=analysis.severity,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResponseContext":
        """Build from plain data; missing keys take the neutral defaults."""
        fields = ("emotion", "sentiment", "intent", "severity")
        return cls(**{name: data[name] for name in fields if data.get(name) is not None})


@dataclass(frozen=True)
class ResponsePackage:
    """
    Reply shown to the user for one turn.

    Attributes:
        primary_reply_text: Main reply
        follow_up_wellness_tip_text: Optional tip (moderate severity only)
        is_crisis_override: Whether the crisis script replaced templating
    """

    primary_reply_text: str
    follow_up_wellness_tip_text: Optional[str] = None
    is_crisis_override: bool = False

    def to_dict(self) -> dict:
        data = {
            "primary_reply_text": self.primary_reply_text,
            "is_crisis_override": self.is_crisis_override,
        }
        if self.follow_up_wellness_tip_text is not None:
            data["follow_up_wellness_tip_text"] = self.follow_up_wellness_tip_text
        return data
