"""
Crisis Detector

Builds the CrisisDetection value object for an utterance.

SAFETY-CRITICAL: Uses the same SeverityClassifier instance as the
analysis pipeline so both paths always agree on the verdict. No
network dependency; this path cannot fail silently on I/O.

PRIVACY: Crisis events are logged as metadata only (severity and
indicator count). Message content is never logged or stored.
"""

from typing import Optional

from mindease.config.logging_config import get_logger
from mindease.domain.enums.severity import Severity
from mindease.domain.models.crisis import CrisisDetection
from mindease.infrastructure.metrics.prometheus_metrics import track_crisis_detection
from mindease.services.detection.severity_classifier import SeverityClassifier
from mindease.services.safety.emergency_resources import (
    GROUNDING_STEPS,
    EmergencyResourceResolver,
)

logger = get_logger(__name__)


class CrisisDetector:
    """
    Keyword crisis detection with helpline resolution.

    Usage:
        detector = CrisisDetector()
        detection = detector.detect("I want to end my life")
        detection.is_crisis         # True
        detection.grounding_steps   # 5-4-3-2-1 sequence
    """

    def __init__(
        self,
        severity_classifier: Optional[SeverityClassifier] = None,
        resources: Optional[EmergencyResourceResolver] = None,
        country_code: Optional[str] = None,
    ) -> None:
        """
        Initialize crisis detector.

        Args:
            severity_classifier: Shared severity classifier
            resources: Helpline resolver
            country_code: Jurisdiction for helplines (resolver default if None)
        """
        self._severity = severity_classifier or SeverityClassifier()
        self._resources = resources or EmergencyResourceResolver()
        self._country_code = country_code

    @property
    def severity_classifier(self) -> SeverityClassifier:
        return self._severity

    def detect(self, text: Optional[str]) -> CrisisDetection:
        """
        Detect crisis language in an utterance.

        Args:
            text: Raw user input

        Returns:
            CrisisDetection; grounding steps are present only for CRISIS
        """
        verdict = self._severity.classify(text)

        if verdict.is_crisis:
            track_crisis_detection()
            logger.warning(
                "Crisis indicators detected",
                severity=verdict.severity.label,
                indicator_count=len(verdict.matched_indicators),
            )

        return CrisisDetection(
            severity=verdict.severity,
            matched_indicators=verdict.matched_indicators,
            helpline_number=self._resources.primary_helpline_number(self._country_code),
            emergency_response_text=self._resources.emergency_response_text(verdict.severity),
            grounding_steps=GROUNDING_STEPS if verdict.severity == Severity.CRISIS else (),
        )

    def has_crisis_indicators(self, text: Optional[str]) -> bool:
        """Quick check for crisis or moderate language."""
        return self._severity.has_indicators(text)

    def helpline_numbers(self) -> dict[str, str]:
        """Hotlines for the configured jurisdiction."""
        return self._resources.helpline_numbers(self._country_code)
