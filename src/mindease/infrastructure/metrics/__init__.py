"""Metrics infrastructure package."""

from mindease.infrastructure.metrics.prometheus_metrics import (
    ANALYSES_TOTAL,
    ANALYSIS_FAILURES_TOTAL,
    CRISIS_DETECTIONS_TOTAL,
    ENRICHMENT_LATENCY,
    ENRICHMENT_REQUESTS_TOTAL,
    RESPONSES_TOTAL,
    track_analysis,
    track_analysis_failure,
    track_crisis_detection,
    track_enrichment,
    track_response,
)

__all__ = [
    "ANALYSES_TOTAL",
    "ANALYSIS_FAILURES_TOTAL",
    "CRISIS_DETECTIONS_TOTAL",
    "ENRICHMENT_LATENCY",
    "ENRICHMENT_REQUESTS_TOTAL",
    "RESPONSES_TOTAL",
    "track_analysis",
    "track_analysis_failure",
    "track_crisis_detection",
    "track_enrichment",
    "track_response",
]
