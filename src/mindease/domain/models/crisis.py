"""
Crisis Detection Model

SAFETY-CRITICAL: This object drives the emergency UI path.
"""

from dataclasses import dataclass, field

from mindease.domain.enums.severity import Severity


@dataclass(frozen=True)
class CrisisDetection:
    """
    Result of crisis detection on one utterance.

    Attributes:
        is_crisis: True iff severity is CRISIS
        severity: Severity verdict shared with analysis
        matched_indicators: Phrases that produced the verdict
        helpline_number: Primary helpline contact
        emergency_response_text: Severity-appropriate supportive text
        grounding_steps: Ordered grounding exercise (empty unless crisis)
    """

    severity: Severity
    helpline_number: str
    emergency_response_text: str
    matched_indicators: frozenset[str] = field(default_factory=frozenset)
    grounding_steps: tuple[str, ...] = ()

    @property
    def is_crisis(self) -> bool:
        return self.severity == Severity.CRISIS

    def to_dict(self) -> dict:
        return {
            "is_crisis": self.is_crisis,
            "severity": self.severity.label,
            "matched_indicators": sorted(self.matched_indicators),
            "helpline_number": self.helpline_number,
            "emergency_response_text": self.emergency_response_text,
            "grounding_steps": list(self.grounding_steps),
        }
