"""Monitoring infrastructure package."""

from mindease.infrastructure.monitoring.sentry_integration import (
    capture_exception_with_context,
    init_sentry,
)

__all__ = [
    "capture_exception_with_context",
    "init_sentry",
]
