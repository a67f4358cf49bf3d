"""Custom exceptions raised by typed-event."""

from __future__ import annotations

from typing import Optional


class EventError(RuntimeError):
    """Base error for all event related exceptions."""


class InvalidArgumentError(EventError, ValueError):
    """Raised when a handler, sink or payload type argument is missing or invalid."""


class ArgsTypeError(EventError, TypeError):
    """Raised when a broadcast payload does not match the Event payload type."""

    def __init__(self, expected: type, message: Optional[str] = None) -> None:
        self.expected = expected
        name = getattr(expected, "__name__", str(expected))
        super().__init__(message or f"Incorrect args being broadcast - args should be a {name}")
