"""
Prometheus Metrics

Counters and histograms for the classification core.
The host application exposes them (e.g. via prometheus_client's
start_http_server or its own /metrics route).

ARCHITECTURE: Metrics are decoupled from business logic.
Only increment/observe; never block on metrics operations.
"""

from prometheus_client import Counter, Histogram, Info


# =============================================================================
# CLASSIFICATION METRICS
# =============================================================================

ANALYSES_TOTAL = Counter(
    "mindease_analyses_total",
    "Utterances analyzed, by severity",
    ["severity"],  # normal, moderate, crisis
)

ANALYSIS_FAILURES_TOTAL = Counter(
    "mindease_analysis_failures_total",
    "Unexpected errors converted to default results",
    ["operation"],  # analyze, build_response
)

# =============================================================================
# ENRICHMENT METRICS
# =============================================================================

ENRICHMENT_REQUESTS_TOTAL = Counter(
    "mindease_enrichment_requests_total",
    "Remote enrichment attempts by outcome",
    ["provider", "outcome"],  # success, fallback
)

ENRICHMENT_LATENCY = Histogram(
    "mindease_enrichment_latency_seconds",
    "Remote enrichment latency",
    ["provider"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 3.0, 5.0],
)

# =============================================================================
# SAFETY METRICS
# =============================================================================

CRISIS_DETECTIONS_TOTAL = Counter(
    "mindease_crisis_detections_total",
    "Crisis-severity verdicts",
)

RESPONSES_TOTAL = Counter(
    "mindease_responses_total",
    "Replies built, by kind",
    ["kind"],  # crisis, templated
)

SYSTEM_INFO = Info(
    "mindease_core",
    "MindEase core information",
)

SYSTEM_INFO.info({"version": "0.1.0"})


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def track_analysis(severity: str) -> None:
    """Record a completed analysis."""
    ANALYSES_TOTAL.labels(severity=severity).inc()


def track_analysis_failure(operation: str) -> None:
    """Record an unexpected error that was converted to a default."""
    ANALYSIS_FAILURES_TOTAL.labels(operation=operation).inc()


def track_enrichment(provider: str, outcome: str, duration_seconds: float) -> None:
    """Record a remote enrichment attempt."""
    ENRICHMENT_REQUESTS_TOTAL.labels(provider=provider, outcome=outcome).inc()
    ENRICHMENT_LATENCY.labels(provider=provider).observe(duration_seconds)


def track_crisis_detection() -> None:
    """Record a crisis verdict."""
    CRISIS_DETECTIONS_TOTAL.inc()


def track_response(kind: str) -> None:
    """Record a built reply."""
    RESPONSES_TOTAL.labels(kind=kind).inc()
