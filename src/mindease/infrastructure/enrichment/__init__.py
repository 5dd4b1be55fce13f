"""Remote enrichment infrastructure package."""

from mindease.infrastructure.enrichment.port import (
    EnrichmentError,
    EnrichmentHTTPError,
    EnrichmentPort,
    EnrichmentTimeoutError,
    LabelScore,
    MalformedEnrichmentPayloadError,
)
from mindease.infrastructure.enrichment.huggingface_client import (
    HuggingFaceInferenceClient,
    parse_classification_payload,
)

__all__ = [
    # Port
    "EnrichmentPort",
    "LabelScore",
    # Errors
    "EnrichmentError",
    "EnrichmentHTTPError",
    "EnrichmentTimeoutError",
    "MalformedEnrichmentPayloadError",
    # HuggingFace
    "HuggingFaceInferenceClient",
    "parse_classification_payload",
]
