"""
MindEase Logging Configuration

structlog setup for the classification core. Every entry carries the
turn_id bound by turn_context(), and redaction runs before rendering.

PRIVACY: Utterance text is never logged. Log lengths and labels only.
"""

import logging
import sys
from contextlib import AbstractContextManager
from typing import Any

import structlog

from mindease.config.settings import Settings

SERVICE_NAME = "mindease-core"
SERVICE_VERSION = "0.1.0"

REDACTED = "[REDACTED]"

# Redacted wherever the fragment appears in a key (hf_api_token, X-Authorization)
SECRET_KEY_FRAGMENTS: frozenset[str] = frozenset({
    "token",
    "secret",
    "api_key",
    "apikey",
    "authorization",
    "bearer",
    "credential",
})

# Redacted on exact key match only; text_length and similar metadata pass
UTTERANCE_KEYS: frozenset[str] = frozenset({
    "text",
    "utterance",
    "inputs",
    "message",
    "message_text",
})


def is_sensitive_key(key: str) -> bool:
    """Whether a log or event key names a secret or raw user text."""
    normalized = key.lower().replace("-", "_")
    if normalized in UTTERANCE_KEYS:
        return True
    return any(fragment in normalized for fragment in SECRET_KEY_FRAGMENTS)


def _redact(key: str, value: Any) -> Any:
    if is_sensitive_key(key):
        return REDACTED
    if isinstance(value, dict):
        return {k: _redact(k, v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_redact(key, item) for item in value]
    return value


def _redact_sensitive_data(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor applying is_sensitive_key() to every key, nested ones included."""
    return {key: _redact(key, value) for key, value in event_dict.items()}


def _add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def get_processors(is_development: bool) -> list[Any]:
    """
    Processor chain: context and metadata first, then redaction, then
    a console renderer in development or JSON elsewhere.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _redact_sensitive_data,
        _add_service_context,
    ]

    if is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])

    return processors


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog and stdlib logging for the host process.

    The core never calls this itself; without it structlog's defaults
    apply and turn_context() still binds turn ids.
    """
    structlog.configure(
        processors=get_processors(settings.env == "development"),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper()),
    )

    # httpx request logs include the inference URL and headers
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def turn_context(turn_id: str) -> AbstractContextManager:
    """
    Bind turn_id to every entry logged inside the block.

    Previously bound context variables are restored on exit.
    """
    return structlog.contextvars.bound_contextvars(turn_id=turn_id)
