"""
Enrichment Port

Abstract interface for remote text classifiers that enrich
emotion and sentiment detection.

ARCHITECTURE: The core depends only on this port. Concrete HTTP
clients live beside it and can be replaced by in-memory fakes, so
the classification core is testable without network access.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LabelScore:
    """
    One label of a remote classification.

    Attributes:
        label: Model-specific label string
        score: Probability-like score (0.0-1.0)
    """

    label: str
    score: float


class EnrichmentPort(ABC):
    """
    Remote classification port.

    Implementations must raise EnrichmentError (or a subclass) on
    any failure. They must not retry; callers fall back instead.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get provider name for logging/tracking."""
        pass

    @abstractmethod
    async def classify(self, text: str, model: str) -> list[LabelScore]:
        """
        Classify text with a remote model.

        Args:
            text: Utterance to classify
            model: Remote model identifier

        Returns:
            Label scores sorted by descending score (never empty)

        Raises:
            EnrichmentError: On transport, HTTP or payload errors
        """
        pass

    async def aclose(self) -> None:
        """Release any held connections."""
        return None


class EnrichmentError(Exception):
    """Base exception for enrichment failures."""

    reason: str = "enrichment_error"

    def __init__(
        self,
        message: str,
        provider: str,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.original_error = original_error


class EnrichmentTimeoutError(EnrichmentError):
    """Remote call exceeded its time budget."""

    reason = "timeout"

    def __init__(self, provider: str, timeout_seconds: float) -> None:
        super().__init__(
            f"{provider} did not respond within {timeout_seconds:.2f}s",
            provider=provider,
        )
        self.timeout_seconds = timeout_seconds


class EnrichmentHTTPError(EnrichmentError):
    """Remote returned a non-2xx status."""

    reason = "http_error"

    def __init__(self, provider: str, status_code: int) -> None:
        super().__init__(
            f"{provider} returned HTTP {status_code}",
            provider=provider,
        )
        self.status_code = status_code


class MalformedEnrichmentPayloadError(EnrichmentError):
    """Remote payload could not be interpreted."""

    reason = "malformed_payload"
