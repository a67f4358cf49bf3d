"""Subscribe-only view of an :class:`~typed_event.event.Event`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from .args import EventArgs

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .event import Event, EventHandler, EventSink

A = TypeVar("A", bound=EventArgs)


class EventSubscriber(Generic[A]):
    """Lets callers subscribe to an Event they are not allowed to broadcast.

    Typical use is an owner that keeps the Event private and publishes
    ``event.subscriber()`` as a property.
    """

    __slots__ = ("_event",)

    def __init__(self, event: "Event[A]") -> None:
        self._event = event

    @property
    def name(self) -> str:
        return self._event.name

    @property
    def args_type(self) -> type:
        return self._event.args_type

    @property
    def subscriber_count(self) -> int:
        return self._event.subscriber_count

    def subscribe(self, handler: "EventHandler[A]") -> None:
        self._event.subscribe(handler)

    def subscribe_stream(self, sink: "EventSink") -> "EventHandler[A]":
        return self._event.subscribe_stream(sink)

    def unsubscribe(self, handler: "EventHandler[A]") -> bool:
        return self._event.unsubscribe(handler)

    def __str__(self) -> str:
        return str(self._event)


__all__ = ["EventSubscriber"]
