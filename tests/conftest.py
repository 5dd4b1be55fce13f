"""Tests configuration and fixtures."""

import asyncio
import random
from typing import Optional, Union

import pytest

from mindease.config import Settings
from mindease.config.settings import EnrichmentSettings
from mindease.infrastructure.enrichment.port import EnrichmentPort, LabelScore
from mindease.services.lexicon.lexicon_store import LexiconStore
from mindease.services.safety.emergency_resources import EmergencyResourceResolver

EMOTION_MODEL = "test/emotion-model"
SENTIMENT_MODEL = "test/sentiment-model"


class FakeEnrichmentPort(EnrichmentPort):
    """
    In-memory enrichment port.

    Each model maps to either a list of label scores or an exception
    to raise. An optional delay simulates a slow remote.
    """

    def __init__(
        self,
        responses: dict[str, Union[list[LabelScore], Exception]],
        delay_seconds: float = 0.0,
    ) -> None:
        self._responses = responses
        self._delay_seconds = delay_seconds
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    @property
    def provider_name(self) -> str:
        return "fake"

    async def classify(self, text: str, model: str) -> list[LabelScore]:
        self.calls.append((text, model))
        if self._delay_seconds:
            await asyncio.sleep(self._delay_seconds)
        response = self._responses[model]
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with enrichment disabled."""
    return Settings(
        env="development",
        enrichment=EnrichmentSettings(enabled=False),
    )


@pytest.fixture
def lexicon() -> LexiconStore:
    return LexiconStore.default()


@pytest.fixture
def resources() -> EmergencyResourceResolver:
    return EmergencyResourceResolver(default_country="IN")


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for exact template assertions."""
    return random.Random(1234)


@pytest.fixture
def make_port():
    """Factory for FakeEnrichmentPort instances."""
    def _make(
        emotion: Union[list[LabelScore], Exception],
        sentiment: Optional[Union[list[LabelScore], Exception]] = None,
        delay_seconds: float = 0.0,
    ) -> FakeEnrichmentPort:
        responses = {EMOTION_MODEL: emotion}
        if sentiment is not None:
            responses[SENTIMENT_MODEL] = sentiment
        return FakeEnrichmentPort(responses, delay_seconds=delay_seconds)

    return _make
