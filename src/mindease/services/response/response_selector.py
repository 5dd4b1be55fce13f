"""
Response Selector

Chooses the reply for one chat turn from classification labels.

SAFETY-CRITICAL: Crisis severity always yields the fixed emergency
script. It is never randomized and never carries a wellness tip.
"""

import random
from typing import Optional

from mindease.config.logging_config import get_logger
from mindease.domain.enums.labels import Emotion, Intent, Sentiment
from mindease.domain.enums.severity import Severity
from mindease.domain.models.response import ResponsePackage
from mindease.infrastructure.metrics.prometheus_metrics import track_response
from mindease.services.response.templates import (
    ADVICE_LANGUAGE_MARKERS,
    DEFAULT_VALIDATION,
    EMOTION_RESPONSES,
    EMOTIONAL_VALIDATIONS,
    GENERAL_WELLNESS_TIPS,
    INTENT_FOLLOW_UPS,
    WELLNESS_TIPS,
)
from mindease.services.safety.emergency_resources import EmergencyResourceResolver

logger = get_logger(__name__)


def contains_advice_language(text: str) -> bool:
    """Check whether a template already offers advice or help."""
    lowered = text.lower()
    return any(marker in lowered for marker in ADVICE_LANGUAGE_MARKERS)


class ResponseSelector:
    """
    Templated reply selection.

    Emotion is the primary axis. Advice- and support-seeking intents
    append a follow-up sentence unless the emotion template already
    offers help. Moderate severity attaches a wellness tip.

    Randomness comes from an injected random.Random so tests can
    seed it and assert exact selections.

    Usage:
        selector = ResponseSelector(rng=random.Random(7))
        package = selector.select(Emotion.ANXIETY, Sentiment.NEGATIVE,
                                  Intent.ASK_ADVICE, Severity.MODERATE)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        resources: Optional[EmergencyResourceResolver] = None,
        country_code: Optional[str] = None,
    ) -> None:
        """
        Initialize selector.

        Args:
            rng: Random source for template choice
            resources: Helpline resolver for the crisis script
            country_code: Jurisdiction for the crisis script
        """
        self._rng = rng or random.Random()
        self._resources = resources or EmergencyResourceResolver()
        self._country_code = country_code

    def select(
        self,
        emotion: Emotion,
        sentiment: Sentiment,
        intent: Intent,
        severity: Severity,
    ) -> ResponsePackage:
        """
        Select the reply for a classified utterance.

        Args:
            emotion: Dominant emotion
            sentiment: Coarse polarity (not used for template choice)
            intent: Conversational intent
            severity: Crisis-risk severity

        Returns:
            ResponsePackage for the turn
        """
        severity = Severity.coerce(severity)
        if severity == Severity.CRISIS:
            track_response("crisis")
            return self.crisis_package()

        emotion = Emotion(emotion)
        intent = Intent(intent)

        reply = self._rng.choice(EMOTION_RESPONSES.get(emotion, EMOTION_RESPONSES[Emotion.NEUTRAL]))

        follow_ups = INTENT_FOLLOW_UPS.get(intent)
        if follow_ups and not contains_advice_language(reply):
            reply = f"{reply}\n\n{self._rng.choice(follow_ups)}"

        tip = None
        if severity == Severity.MODERATE:
            tip = self.wellness_tip_for(emotion)

        logger.debug(
            "Response selected",
            emotion=emotion.value,
            intent=intent.value,
            severity=severity.label,
            has_tip=tip is not None,
        )
        track_response("templated")
        return ResponsePackage(
            primary_reply_text=reply,
            follow_up_wellness_tip_text=tip,
            is_crisis_override=False,
        )

    def crisis_package(self) -> ResponsePackage:
        """The fixed crisis response."""
        return ResponsePackage(
            primary_reply_text=self._resources.format_crisis_script(self._country_code),
            follow_up_wellness_tip_text=None,
            is_crisis_override=True,
        )

    def wellness_tip_for(self, emotion: Emotion) -> str:
        """Random wellness tip for an emotion (general list if none specific)."""
        return self._rng.choice(WELLNESS_TIPS.get(emotion, GENERAL_WELLNESS_TIPS))

    @staticmethod
    def validation_for(emotion: Emotion) -> str:
        """One-line emotional validation."""
        return EMOTIONAL_VALIDATIONS.get(emotion, DEFAULT_VALIDATION)
