"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
from typing import Any

import structlog

from stripe_bindings.core.config import get_settings


_CONFIGURED = False

# Keys that must never reach a log line even if a caller binds them.
_REDACTED_KEYS = {"api_key", "authorization", "webhook_secret", "secret"}


def _redact_secrets(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    del logger, method_name
    for key in list(event_dict):
        if key.lower() in _REDACTED_KEYS:
            event_dict[key] = "***"
    return event_dict


def configure_logging(level: str | None = None) -> None:
    """Initialize structlog once for JSON-formatted logs.

    The bindings never call this themselves; applications opt in.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or get_settings().log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=numeric_level, format="%(message)s")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _redact_secrets,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def reset_logging_for_tests() -> None:
    global _CONFIGURED
    _CONFIGURED = False
    structlog.reset_defaults()
