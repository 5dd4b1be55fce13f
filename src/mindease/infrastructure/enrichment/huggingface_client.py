"""
HuggingFace Inference Client

EnrichmentPort implementation for the HuggingFace Inference API.

Sends {"inputs": text} to {base_url}/models/{model} with a bearer
token and parses the text-classification payload.
"""

from typing import Any, Optional

import httpx

from mindease.config.settings import EnrichmentSettings
from mindease.config.logging_config import get_logger
from mindease.infrastructure.enrichment.port import (
    EnrichmentError,
    EnrichmentHTTPError,
    EnrichmentPort,
    EnrichmentTimeoutError,
    LabelScore,
    MalformedEnrichmentPayloadError,
)

logger = get_logger(__name__)


def parse_classification_payload(payload: Any, provider: str = "huggingface") -> list[LabelScore]:
    """
    Parse a text-classification response.

    Accepts both [[{label, score}, ...]] (batched) and
    [{label, score}, ...] (flat) shapes.

    Returns:
        Label scores sorted by descending score

    Raises:
        MalformedEnrichmentPayloadError: If the payload has another shape
    """
    if isinstance(payload, list) and payload and isinstance(payload[0], list):
        payload = payload[0]

    if not isinstance(payload, list) or not payload:
        raise MalformedEnrichmentPayloadError(
            "Expected a non-empty list of label scores",
            provider=provider,
        )

    scores = []
    for item in payload:
        if not isinstance(item, dict):
            raise MalformedEnrichmentPayloadError("Label entry is not an object", provider=provider)
        label = item.get("label")
        score = item.get("score")
        if not isinstance(label, str) or not isinstance(score, (int, float)) or isinstance(score, bool):
            raise MalformedEnrichmentPayloadError("Label entry missing label/score", provider=provider)
        if not 0.0 <= float(score) <= 1.0:
            raise MalformedEnrichmentPayloadError(f"Score out of range: {score}", provider=provider)
        scores.append(LabelScore(label=label, score=float(score)))

    scores.sort(key=lambda s: s.score, reverse=True)
    return scores


class HuggingFaceInferenceClient(EnrichmentPort):
    """
    Async HuggingFace Inference API client.

    No retries are performed. Transport errors, timeouts, non-2xx
    statuses and unexpected payloads all raise EnrichmentError.

    Usage:
        async with HuggingFaceInferenceClient(api_token="hf_...") as client:
            scores = await client.classify("I'm so happy", "SamLowe/roberta-base-go_emotions")
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = "https://api-inference.huggingface.co",
        timeout_seconds: float = 3.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            api_token: HuggingFace API token
            base_url: Inference API base URL
            timeout_seconds: Per-request timeout
            http_client: Optional preconfigured client (tests inject MockTransport)
        """
        self._timeout_seconds = timeout_seconds
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout_seconds),
            headers={"Authorization": f"Bearer {api_token}"},
        )

    @classmethod
    def from_settings(cls, settings: EnrichmentSettings) -> "HuggingFaceInferenceClient":
        return cls(
            api_token=settings.api_token.get_secret_value(),
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
        )

    @property
    def provider_name(self) -> str:
        return "huggingface"

    async def classify(self, text: str, model: str) -> list[LabelScore]:
        try:
            response = await self._client.post(
                f"/models/{model}",
                json={"inputs": text},
            )
        except httpx.TimeoutException as e:
            raise EnrichmentTimeoutError(self.provider_name, self._timeout_seconds) from e
        except httpx.HTTPError as e:
            raise EnrichmentError(
                f"Transport error calling {self.provider_name}: {type(e).__name__}",
                provider=self.provider_name,
                original_error=e,
            ) from e

        if not response.is_success:
            raise EnrichmentHTTPError(self.provider_name, response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedEnrichmentPayloadError(
                "Response body is not JSON",
                provider=self.provider_name,
                original_error=e,
            ) from e

        scores = parse_classification_payload(payload, self.provider_name)
        logger.debug(
            "Enrichment classification received",
            model=model,
            top_label=scores[0].label,
            label_count=len(scores),
        )
        return scores

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HuggingFaceInferenceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
