"""
Analysis Orchestrator

Single entry point for classifying an utterance, detecting crisis
language and building the reply for one chat turn.

ARCHITECTURE: Severity and intent are always computed by local rules.
Only the emotion source may reach the network, and its failures are
absorbed inside the source. Unexpected errors stop at this boundary
and are converted to safe default results.

SAFETY-CRITICAL: analyze() and detect_crisis() share one
SeverityClassifier, so the analysis severity and the crisis verdict
for the same text always agree.
"""

from typing import Optional
from uuid import uuid4

from mindease.config.logging_config import get_logger, turn_context
from mindease.config.settings import Settings, get_settings
from mindease.domain.enums.severity import Severity
from mindease.domain.models.analysis import AnalysisResult
from mindease.domain.models.crisis import CrisisDetection
from mindease.domain.models.response import ResponseContext, ResponsePackage
from mindease.infrastructure.metrics.prometheus_metrics import (
    track_analysis,
    track_analysis_failure,
)
from mindease.infrastructure.monitoring.sentry_integration import (
    capture_exception_with_context,
    init_sentry,
)
from mindease.services.detection.emotion_classifier import EmotionClassifier, LocalRuleSource
from mindease.services.detection.intent_classifier import IntentClassifier
from mindease.services.detection.sentiment_deriver import SentimentDeriver
from mindease.services.detection.severity_classifier import SeverityClassifier
from mindease.services.lexicon.lexicon_store import LexiconStore, get_default_lexicon
from mindease.services.response.response_selector import ResponseSelector
from mindease.services.response.templates import GENERIC_SUPPORTIVE_REPLY
from mindease.services.safety.crisis_detector import CrisisDetector
from mindease.services.safety.emergency_resources import EmergencyResourceResolver

logger = get_logger(__name__)


def _is_crisis(severity: object) -> bool:
    try:
        return Severity.coerce(severity) == Severity.CRISIS
    except (TypeError, ValueError):
        return False


class AnalysisOrchestrator:
    """
    Chat turn orchestration.

    Pipeline for analyze():
    1. Severity (local rules, shared with crisis detection)
    2. Intent (local rules)
    3. Emotion (configured source, local or remote-enriched)
    4. Sentiment (remote override, else derived from emotion)

    Usage:
        orchestrator = AnalysisOrchestrator.from_settings(get_settings())
        analysis, reply = await orchestrator.respond("I feel so hopeless")
        await orchestrator.aclose()
    """

    def __init__(
        self,
        lexicon: Optional[LexiconStore] = None,
        emotion_classifier: Optional[EmotionClassifier] = None,
        response_selector: Optional[ResponseSelector] = None,
        resources: Optional[EmergencyResourceResolver] = None,
        country_code: Optional[str] = None,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            lexicon: Phrase tables (process default if None)
            emotion_classifier: Emotion classifier (local rules if None)
            response_selector: Reply selector (unseeded if None)
            resources: Helpline resolver
            country_code: Jurisdiction for helplines (resolver default if None)
        """
        lexicon = lexicon or get_default_lexicon()
        resources = resources or EmergencyResourceResolver()

        self._severity = SeverityClassifier(lexicon)
        self._intent = IntentClassifier(lexicon)
        self._local_emotion = LocalRuleSource(lexicon)
        self._emotion = emotion_classifier or EmotionClassifier(self._local_emotion)
        self._sentiment = SentimentDeriver()
        self._crisis = CrisisDetector(self._severity, resources, country_code)
        self._responses = response_selector or ResponseSelector(
            resources=resources,
            country_code=country_code,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        lexicon: Optional[LexiconStore] = None,
        response_selector: Optional[ResponseSelector] = None,
    ) -> "AnalysisOrchestrator":
        """
        Build an orchestrator from configuration.

        Initializes Sentry when a DSN is configured. Logging is
        configured by the host via configure_logging().
        """
        settings = settings or get_settings()

        if settings.monitoring.sentry_dsn:
            init_sentry(
                dsn=settings.monitoring.sentry_dsn,
                environment=settings.env,
                traces_sample_rate=settings.monitoring.sentry_traces_sample_rate,
            )

        resources = EmergencyResourceResolver(
            default_country=settings.safety.helpline_country,
            config_path=settings.safety.helpline_config_path,
        )
        return cls(
            lexicon=lexicon,
            emotion_classifier=EmotionClassifier.from_settings(settings, lexicon),
            response_selector=response_selector,
            resources=resources,
        )

    @property
    def severity_classifier(self) -> SeverityClassifier:
        return self._severity

    @property
    def emotion_classifier(self) -> EmotionClassifier:
        return self._emotion

    async def analyze(self, text: Optional[str]) -> AnalysisResult:
        """
        Classify one utterance.

        Never raises for string input. Enrichment failures surface as
        fallback_reason on the result; unexpected errors are logged,
        reported and replaced by the local-only result.

        Args:
            text: Raw user input

        Returns:
            AnalysisResult
        """
        with turn_context(uuid4().hex):
            return await self._analyze_turn(text)

    def detect_crisis(self, text: Optional[str]) -> CrisisDetection:
        """
        Detect crisis language.

        Pure local code; crisis verdicts are logged as metadata only.
        """
        return self._crisis.detect(text)

    def build_response(self, context: ResponseContext) -> ResponsePackage:
        """
        Build the reply for classified labels.

        Unexpected errors fall back to a generic supportive reply.
        A crisis context always gets the crisis script.
        """
        try:
            return self._responses.select(
                emotion=context.emotion,
                sentiment=context.sentiment,
                intent=context.intent,
                severity=context.severity,
            )
        except Exception as e:
            severity_label = getattr(context.severity, "label", str(context.severity))
            logger.exception(
                "Response selection failed, using generic reply",
                severity=severity_label,
                error_type=type(e).__name__,
            )
            capture_exception_with_context(
                e,
                operation="build_response",
                extra={"severity": severity_label, "emotion": str(context.emotion)},
            )
            track_analysis_failure("build_response")

        if _is_crisis(context.severity):
            return self._responses.crisis_package()
        return ResponsePackage(primary_reply_text=GENERIC_SUPPORTIVE_REPLY)

    async def respond(self, text: Optional[str]) -> tuple[AnalysisResult, ResponsePackage]:
        """Analyze an utterance and build its reply in one turn."""
        with turn_context(uuid4().hex):
            analysis = await self._analyze_turn(text)
            return analysis, self.build_response(ResponseContext.from_analysis(analysis))

    def helpline_numbers(self) -> dict[str, str]:
        """Hotlines for the configured jurisdiction."""
        return self._crisis.helpline_numbers()

    async def aclose(self) -> None:
        """Release the emotion source's resources."""
        await self._emotion.aclose()

    async def _analyze_turn(self, text: Optional[str]) -> AnalysisResult:
        text_length = len(text) if text else 0

        try:
            result = await self._classify(text)
        except Exception as e:
            logger.exception(
                "Analysis failed, using local rules",
                text_length=text_length,
                error_type=type(e).__name__,
            )
            capture_exception_with_context(
                e,
                operation="analyze",
                extra={"text_length": text_length},
            )
            track_analysis_failure("analyze")
            result = self._local_result(text)

        track_analysis(result.severity.label)
        logger.debug(
            "Analysis complete",
            text_length=text_length,
            emotion=result.emotion.value,
            severity=result.severity.label,
            intent=result.intent.value,
            enrichment_used=result.enrichment_used,
            fallback_reason=result.fallback_reason,
        )
        return result

    async def _classify(self, text: Optional[str]) -> AnalysisResult:
        verdict = self._severity.classify(text)
        intent = self._intent.classify(text)
        outcome = await self._emotion.classify(text)

        return AnalysisResult(
            emotion=outcome.emotion,
            sentiment=self._sentiment.resolve(outcome),
            severity=verdict.severity,
            intent=intent,
            confidence=outcome.confidence,
            enrichment_used=outcome.from_remote,
            fallback_reason=outcome.fallback_reason,
        )

    def _local_result(self, text: Optional[str]) -> AnalysisResult:
        """Rule-only result, or the neutral default if rules fail too."""
        try:
            outcome = self._local_emotion.classify_sync(text)
            return AnalysisResult(
                emotion=outcome.emotion,
                sentiment=self._sentiment.derive(outcome.emotion),
                severity=self._severity.classify(text).severity,
                intent=self._intent.classify(text),
                fallback_reason="internal_error",
            )
        except Exception:
            logger.exception("Local analysis failed, returning neutral default")
            return AnalysisResult(fallback_reason="internal_error")
