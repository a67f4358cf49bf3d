"""Settings for the typed-event logging layer."""
from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

LEVEL_ENV = "TYPED_EVENT_LOG_LEVEL"
JSON_ENV = "TYPED_EVENT_LOG_JSON"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_FALSY = {"0", "false", "no", "off"}


class LoggingSettings(BaseModel):
    """How the package logger emits records."""

    level: str = Field(default="WARNING", description="Standard logging level name")
    json_output: bool = Field(
        default=True,
        alias="json",
        description="Emit one JSON object per record; plain text when False.",
    )

    model_config = {"populate_by_name": True}

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, value: object) -> str:
        name = str(value).strip().upper()
        if name not in _LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return name


def load_logging_settings(environ: Optional[Mapping[str, str]] = None) -> LoggingSettings:
    """Build :class:`LoggingSettings` from ``environ`` (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ
    raw: dict = {}
    if env.get(LEVEL_ENV):
        raw["level"] = env[LEVEL_ENV]
    if env.get(JSON_ENV):
        raw["json"] = env[JSON_ENV].strip().lower() not in _FALSY
    return LoggingSettings.model_validate(raw)


__all__ = ["JSON_ENV", "LEVEL_ENV", "LoggingSettings", "load_logging_settings"]
