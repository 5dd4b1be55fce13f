"""
Emotion Classifier

Selects one dominant emotion per utterance.

Two strategies implement the EmotionSource interface:
- LocalRuleSource: keyword lookup, first category with a hit wins
- RemoteEnrichedSource: remote model labels mapped onto the closed
  emotion set, wrapping a LocalRuleSource as silent fallback

The strategy is chosen once, at construction time, from configuration.

CLINICAL_REVIEW_REQUIRED: Label alias tables map third-party model
labels onto product emotions and need review when models change.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Optional

from mindease.config.settings import Settings
from mindease.config.logging_config import get_logger
from mindease.domain.enums.labels import Emotion, Sentiment
from mindease.domain.models.analysis import LOCAL_RULES_SOURCE, EmotionOutcome
from mindease.infrastructure.enrichment.port import (
    EnrichmentError,
    EnrichmentPort,
    LabelScore,
)
from mindease.infrastructure.enrichment.huggingface_client import HuggingFaceInferenceClient
from mindease.infrastructure.metrics.prometheus_metrics import track_enrichment
from mindease.services.lexicon.lexicon_store import (
    LexiconStore,
    get_default_lexicon,
    normalize_text,
)

logger = get_logger(__name__)


# Remote model label -> product emotion
# Covers GoEmotions (28 labels), Ekman-style 7-label models and
# the 6-label "emotion" dataset models.
EMOTION_LABEL_ALIASES: MappingProxyType = MappingProxyType({
    # joy family
    "joy": Emotion.JOY,
    "admiration": Emotion.JOY,
    "amusement": Emotion.JOY,
    "approval": Emotion.JOY,
    "excitement": Emotion.JOY,
    "gratitude": Emotion.JOY,
    "optimism": Emotion.JOY,
    "pride": Emotion.JOY,
    "relief": Emotion.JOY,
    "happiness": Emotion.JOY,
    # love family
    "love": Emotion.LOVE,
    "caring": Emotion.LOVE,
    "desire": Emotion.LOVE,
    # anger family
    "anger": Emotion.ANGER,
    "annoyance": Emotion.ANGER,
    "disapproval": Emotion.ANGER,
    # sadness family
    "sadness": Emotion.SADNESS,
    "grief": Emotion.SADNESS,
    "remorse": Emotion.SADNESS,
    "disappointment": Emotion.SADNESS,
    "embarrassment": Emotion.SADNESS,
    # fear / anxiety
    "fear": Emotion.FEAR,
    "nervousness": Emotion.ANXIETY,
    "anxiety": Emotion.ANXIETY,
    # remaining closed-set labels
    "disgust": Emotion.DISGUST,
    "surprise": Emotion.SURPRISE,
    "realization": Emotion.SURPRISE,
    "curiosity": Emotion.CONFUSION,
    "confusion": Emotion.CONFUSION,
    "loneliness": Emotion.LONELINESS,
    "stress": Emotion.STRESS,
    "neutral": Emotion.NEUTRAL,
})

# Remote sentiment label -> product sentiment
SENTIMENT_LABEL_ALIASES: MappingProxyType = MappingProxyType({
    "positive": Sentiment.POSITIVE,
    "pos": Sentiment.POSITIVE,
    "label_2": Sentiment.POSITIVE,
    "neutral": Sentiment.NEUTRAL,
    "neu": Sentiment.NEUTRAL,
    "label_1": Sentiment.NEUTRAL,
    "negative": Sentiment.NEGATIVE,
    "neg": Sentiment.NEGATIVE,
    "label_0": Sentiment.NEGATIVE,
})


def map_emotion_label(label: str) -> Optional[Emotion]:
    """Map a remote emotion label to the closed set, or None if unknown."""
    return EMOTION_LABEL_ALIASES.get(label.strip().lower())


def map_sentiment_label(label: str) -> Optional[Sentiment]:
    """Map a remote sentiment label, or None if unknown."""
    return SENTIMENT_LABEL_ALIASES.get(label.strip().lower())


class EmotionSource(ABC):
    """
    Strategy interface for emotion detection.

    Implementations never raise for string input; failures are
    reported through EmotionOutcome.fallback_used.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    async def classify(self, text: Optional[str]) -> EmotionOutcome:
        pass

    async def aclose(self) -> None:
        """Release resources held by the source."""
        return None


class LocalRuleSource(EmotionSource):
    """
    Keyword emotion detection.

    Iterates emotion categories in the lexicon's declared order;
    the first category with a substring hit wins. Confidence is
    always 0 since keyword rules carry no probabilistic signal.
    """

    def __init__(self, lexicon: Optional[LexiconStore] = None) -> None:
        self._lexicon = lexicon or get_default_lexicon()

    @property
    def name(self) -> str:
        return LOCAL_RULES_SOURCE

    def classify_sync(self, text: Optional[str]) -> EmotionOutcome:
        normalized = normalize_text(text)
        if normalized:
            for emotion in self._lexicon.emotion_order:
                if any(phrase in normalized for phrase in self._lexicon.lookup(emotion)):
                    return EmotionOutcome(emotion=emotion, source=self.name)

        return EmotionOutcome(emotion=Emotion.NEUTRAL, source=self.name)

    async def classify(self, text: Optional[str]) -> EmotionOutcome:
        return self.classify_sync(text)


class RemoteEnrichedSource(EmotionSource):
    """
    Remote model emotion detection with silent local fallback.

    Emotion and (optional) sentiment requests are issued concurrently
    under one timeout. No retries: on timeout, transport error,
    non-2xx, malformed payload or an unmapped label, the utterance is
    classified by the wrapped LocalRuleSource instead. A failed
    sentiment call alone only drops the sentiment override.
    """

    def __init__(
        self,
        port: EnrichmentPort,
        emotion_model: str,
        sentiment_model: Optional[str] = None,
        timeout_seconds: float = 3.0,
        fallback: Optional[LocalRuleSource] = None,
    ) -> None:
        """
        Initialize enriched source.

        Args:
            port: Remote classification port
            emotion_model: Remote emotion model identifier
            sentiment_model: Remote sentiment model identifier (optional)
            timeout_seconds: Bound for the concurrent remote calls
            fallback: Local source used when enrichment fails
        """
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self._port = port
        self._emotion_model = emotion_model
        self._sentiment_model = sentiment_model
        self._timeout_seconds = timeout_seconds
        self._fallback = fallback or LocalRuleSource()

    @property
    def name(self) -> str:
        return f"remote:{self._port.provider_name}"

    async def classify(self, text: Optional[str]) -> EmotionOutcome:
        if not normalize_text(text):
            return self._fallback.classify_sync(text)

        started = time.perf_counter()
        try:
            emotion_scores, sentiment_scores = await asyncio.wait_for(
                self._fetch(text),
                timeout=self._timeout_seconds,
            )
        except TimeoutError:
            return self._degrade(text, "timeout", started)
        except EnrichmentError as e:
            return self._degrade(text, e.reason, started, error=e)
        except Exception as e:
            # The port is pluggable; any failure downgrades to rules
            return self._degrade(text, "unexpected_error", started, error=e)

        top = max(emotion_scores, key=lambda s: s.score)
        emotion = map_emotion_label(top.label)
        if emotion is None:
            return self._degrade(text, "unmapped_label", started, label=top.label)

        sentiment_override = None
        if sentiment_scores:
            top_sentiment = max(sentiment_scores, key=lambda s: s.score)
            sentiment_override = map_sentiment_label(top_sentiment.label)

        track_enrichment(self._port.provider_name, "success", time.perf_counter() - started)
        return EmotionOutcome(
            emotion=emotion,
            confidence=min(1.0, max(0.0, top.score)),
            sentiment_override=sentiment_override,
            source=self.name,
        )

    async def _fetch(self, text: str) -> tuple[list[LabelScore], Optional[list[LabelScore]]]:
        """Run emotion and sentiment calls concurrently."""
        calls = [self._port.classify(text, self._emotion_model)]
        if self._sentiment_model:
            calls.append(self._port.classify(text, self._sentiment_model))

        results = await asyncio.gather(*calls, return_exceptions=True)

        emotion_result = results[0]
        if isinstance(emotion_result, BaseException):
            raise emotion_result
        if not emotion_result:
            raise EnrichmentError("Empty emotion result", provider=self._port.provider_name)

        sentiment_result = results[1] if len(results) > 1 else None
        if isinstance(sentiment_result, BaseException):
            if not isinstance(sentiment_result, Exception):
                raise sentiment_result
            logger.warning(
                "Sentiment enrichment failed, deriving sentiment from emotion",
                provider=self._port.provider_name,
                error_type=type(sentiment_result).__name__,
            )
            sentiment_result = None

        return emotion_result, sentiment_result or None

    def _degrade(
        self,
        text: Optional[str],
        reason: str,
        started: float,
        error: Optional[Exception] = None,
        label: Optional[str] = None,
    ) -> EmotionOutcome:
        """Classify locally and mark the outcome as a fallback."""
        track_enrichment(self._port.provider_name, "fallback", time.perf_counter() - started)
        logger.warning(
            "Emotion enrichment failed, using local rules",
            provider=self._port.provider_name,
            reason=reason,
            error_type=type(error).__name__ if error else None,
            label=label,
        )
        local = self._fallback.classify_sync(text)
        return EmotionOutcome(
            emotion=local.emotion,
            confidence=0.0,
            source=local.source,
            fallback_used=True,
            fallback_reason=reason,
        )

    async def aclose(self) -> None:
        await self._port.aclose()


class EmotionClassifier:
    """
    Emotion classification facade.

    Usage:
        classifier = EmotionClassifier()                  # local rules
        classifier = EmotionClassifier.from_settings(settings)
        outcome = await classifier.classify("I'm so happy today")
    """

    def __init__(self, source: Optional[EmotionSource] = None) -> None:
        self._source = source or LocalRuleSource()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        lexicon: Optional[LexiconStore] = None,
    ) -> "EmotionClassifier":
        """
        Select the emotion strategy from configuration.

        Enrichment is used only when enabled with a usable token;
        otherwise the classifier runs on local rules.
        """
        local = LocalRuleSource(lexicon)
        enrichment = settings.enrichment

        if not enrichment.is_usable():
            if enrichment.enabled:
                logger.warning("Enrichment enabled without a usable API token, using local rules")
            return cls(local)

        logger.info(
            "Emotion enrichment enabled",
            emotion_model=enrichment.emotion_model,
            sentiment_model=enrichment.sentiment_model,
            timeout_seconds=enrichment.timeout_seconds,
        )
        return cls(RemoteEnrichedSource(
            port=HuggingFaceInferenceClient.from_settings(enrichment),
            emotion_model=enrichment.emotion_model,
            sentiment_model=enrichment.sentiment_model,
            timeout_seconds=enrichment.timeout_seconds,
            fallback=local,
        ))

    @property
    def source(self) -> EmotionSource:
        return self._source

    @property
    def is_enriched(self) -> bool:
        return isinstance(self._source, RemoteEnrichedSource)

    async def classify(self, text: Optional[str]) -> EmotionOutcome:
        return await self._source.classify(text)

    async def aclose(self) -> None:
        await self._source.aclose()
