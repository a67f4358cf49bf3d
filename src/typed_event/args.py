"""Payload types delivered to Event handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


@dataclass
class EventArgs:
    """Base payload passed to handlers when an :class:`~typed_event.event.Event` fires.

    Subclass it to give subscribers data about what happened::

        @dataclass
        class Changed(EventArgs):
            new_value: int

    ``event_name`` and ``when_occurred`` are not constructor arguments. The
    broadcasting Event stamps them on every delivery.
    """

    event_name: str = field(default="", init=False)
    when_occurred: Optional[datetime] = field(default=None, init=False)


@dataclass
class WhenWhy(EventArgs):
    """Payload carrying an optional free-form description."""

    description: str = ""

    def __post_init__(self) -> None:
        self.when_occurred = datetime.now(timezone.utc)


@dataclass
class Value(EventArgs, Generic[T]):
    """Payload with a single generic value."""

    value: T


@dataclass
class Values(EventArgs, Generic[T1, T2]):
    """Payload with two generic values."""

    value1: T1
    value2: T2


__all__ = ["EventArgs", "Value", "Values", "WhenWhy"]
