"""Logging configuration helpers with Structlog integration.

Key Responsibilities:
    - Configure standard library logging and Structlog to emit single line JSON
    - Redact configured sensitive field names in both pipelines
    - Render :class:`Failure` values attached to log events through their
      cause-free dictionary form

Collaborators:
    - Upstream: Application entry-points call :func:`configure_logging` once
    - Downstream: Relies on ``logging`` and ``structlog``

Side Effects:
    - Configures global logging handlers and the Structlog pipeline
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from typing import Any

import structlog

from domix_problem.config.settings import LoggingSettings
from domix_problem.models.failure import Failure

_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


def _render_failures(value: object) -> object:
    if isinstance(value, Failure):
        return value.asdict()
    if isinstance(value, dict):
        return {key: _render_failures(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_render_failures(item) for item in value]
    return value


def _redact(event: dict[str, Any], scrub_fields: frozenset[str]) -> dict[str, Any]:
    for key in event:
        if key.lower() in scrub_fields:
            event[key] = "***"
    return event


class JsonFormatter(logging.Formatter):
    """Formats log records as single line JSON objects.

    Values JSON cannot encode fall back to ``str``; failures are rendered via
    :meth:`Failure.asdict` first, so their causes never reach the output.
    """

    def __init__(self, *, scrub_fields: Iterable[str] | None = None) -> None:
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S%z")
        self._scrub_fields = frozenset(field.lower() for field in scrub_fields or ())

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, self.datefmt),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                payload[key] = _render_failures(value)
        _redact(payload, self._scrub_fields)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, sort_keys=True, default=str)


def failure_renderer(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Structlog processor rendering bound failures without their cause."""
    for key, value in event_dict.items():
        event_dict[key] = _render_failures(value)
    return event_dict


def configure_logging(
    level: int | str | None = None,
    *,
    settings: LoggingSettings | None = None,
) -> None:
    """Configure global logging for the application.

    Args:
        level: Optional logging level or level name. Ignored when ``settings``
            is provided.
        settings: Optional logging settings providing level and scrub fields.
    """
    scrub_fields: Iterable[str] = ()
    if settings is not None:
        level = settings.level
        scrub_fields = settings.scrub_fields

    if isinstance(level, str):
        level_value = logging.getLevelName(level.upper())
        if not isinstance(level_value, int):
            level_value = logging.INFO
    elif isinstance(level, int):
        level_value = level
    else:
        level_value = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(scrub_fields=scrub_fields))
    logging.basicConfig(level=level_value, handlers=[handler], force=True)

    lowered = frozenset(field.lower() for field in scrub_fields)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            lambda _, __, event_dict: _redact(event_dict, lowered),
            failure_renderer,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger with the given name."""
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "failure_renderer", "get_logger"]
