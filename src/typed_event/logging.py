"""Structured JSON logging helpers for typed-event."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging import Logger
from typing import Dict, Optional

from pydantic import ValidationError

from .config import LoggingSettings, load_logging_settings

_LOGGER_NAME = "typed_event"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        payload = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        if hasattr(record, "payload"):
            payload["payload"] = getattr(record, "payload")
        return json.dumps(payload, ensure_ascii=False, default=str)


def _formatter(settings: LoggingSettings) -> logging.Formatter:
    if settings.json_output:
        return _JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)


def configure_logging(settings: Optional[LoggingSettings] = None) -> Logger:
    """Apply ``settings`` to the package logger and return it.

    Child loggers from :func:`get_logger` propagate here, so this is the only
    logger that carries a handler.
    """

    settings = settings or load_logging_settings()
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(_formatter(settings))
    logger.setLevel(getattr(logging, settings.level))
    return logger


def get_logger(name: str | None = None) -> Logger:
    """Return a module level logger configured for structured JSON output."""

    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        try:
            settings = load_logging_settings()
        except ValidationError:
            settings = LoggingSettings()
        configure_logging(settings)
    logger_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(logger_name)


def log_event(
    logger: Logger, event: str, payload: Dict[str, object] | None = None
) -> None:
    """Log an event payload in a consistent JSON format."""

    payload = payload or {}
    extra = {"event": event, "payload": payload}
    logger.debug(f"event={event}", extra=extra)


__all__ = ["configure_logging", "get_logger", "log_event"]
