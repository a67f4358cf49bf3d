"""The :class:`Event` publish/subscribe primitive."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Generic, List, Optional, Protocol, TypeVar, get_args, get_origin

from .args import EventArgs
from .exceptions import ArgsTypeError, InvalidArgumentError
from .logging import get_logger
from .subscriber import EventSubscriber

LOGGER = get_logger("event")

A = TypeVar("A", bound=EventArgs)

EventHandler = Callable[[A], None]


class EventSink(Protocol):
    """Push-based consumer an Event can forward payloads into."""

    def put_nowait(self, item: Any) -> None:  # pragma: no cover - Protocol
        ...


def _payload_class(args_type: Any) -> type:
    origin = get_origin(args_type) or args_type
    if not (isinstance(origin, type) and issubclass(origin, EventArgs)):
        raise InvalidArgumentError(f"args_type must be EventArgs or a subclass, got {args_type!r}")
    return origin


def _require_handler(handler: Any) -> None:
    if handler is None or not callable(handler):
        raise InvalidArgumentError("a handler must be specified")


class Event(Generic[A]):
    """Some number of handlers (subscribers) notified together by :meth:`broadcast`.

    An Event carries one payload type for its whole life. It is taken from
    ``args_type`` or from the subscripted class, and defaults to
    :class:`EventArgs`::

        changed = Event("changed")                    # Event<EventArgs>
        changed = Event[Value[int]]("changed")        # Event<Value>
        changed = Event("changed", args_type=Value)   # same

    Handlers run synchronously, in subscription order, on the caller's thread.
    Dispatch iterates a snapshot of the subscribers taken when the broadcast
    starts: handlers subscribed during a broadcast first run on the next one,
    and handlers unsubscribed during a broadcast still receive the payload in
    flight. An exception raised by a handler propagates out of
    :meth:`broadcast` and the remaining handlers are skipped.
    """

    def __init__(self, name: str = "", args_type: Optional[type] = None) -> None:
        self._name = name or ""
        self._args_type: Optional[type] = None if args_type is None else _payload_class(args_type)
        # allocated on first subscribe
        self._handlers: Optional[List[EventHandler[A]]] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def args_type(self) -> type:
        """The payload class this Event broadcasts.

        For ``Event[X](...)`` the class is resolved here on first access, so an
        ``X`` that is not an :class:`EventArgs` subclass raises
        :class:`InvalidArgumentError` on first use rather than at construction.
        """

        if self._args_type is not None:
            return self._args_type
        # set by typing after __init__ when constructed as Event[X](...)
        orig_class = getattr(self, "__orig_class__", None)
        if orig_class is None:
            return EventArgs
        params = get_args(orig_class)
        if not params or isinstance(params[0], TypeVar):
            self._args_type = EventArgs
        else:
            self._args_type = _payload_class(params[0])
        return self._args_type

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers) if self._handlers else 0

    def subscribe(self, handler: EventHandler[A]) -> None:
        """Add ``handler``. The same handler may be added more than once."""

        _require_handler(handler)
        if self._handlers is None:
            self._handlers = []
        self._handlers.append(handler)
        LOGGER.debug("Subscribed to %s (subscribers=%d)", self, len(self._handlers))

    def subscribe_stream(self, sink: EventSink) -> EventHandler[A]:
        """Forward every broadcast payload into ``sink`` via ``put_nowait``.

        Works with :class:`queue.Queue` and :class:`asyncio.Queue`. The sink is
        never closed or drained here; its owner remains responsible for it.
        Returns the forwarding handler so it can be passed to
        :meth:`unsubscribe` later.
        """

        put = getattr(sink, "put_nowait", None)
        if not callable(put):
            raise InvalidArgumentError("a sink with put_nowait() must be specified")

        def forward(args: A) -> None:
            put(args)

        self.subscribe(forward)
        return forward

    def unsubscribe(self, handler: EventHandler[A]) -> bool:
        """Remove the first occurrence of ``handler``.

        Returns ``True`` if it was subscribed, ``False`` otherwise. Handlers
        match by identity, then by ``==``: ``obj.method`` can be passed again,
        and a callable with a value-based ``__eq__`` removes an equal instance.
        Anonymous handlers can only be removed with :meth:`unsubscribe_all`.
        """

        _require_handler(handler)
        if not self._handlers:
            return False
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        LOGGER.debug("Unsubscribed from %s (subscribers=%d)", self, len(self._handlers))
        return True

    def unsubscribe_all(self) -> None:
        if self._handlers:
            self._handlers.clear()
            LOGGER.debug("Unsubscribed all from %s", self)

    def subscriber(self) -> EventSubscriber[A]:
        """Return a subscribe-only view of this Event."""

        return EventSubscriber(self)

    def broadcast(self, args: Optional[A] = None) -> bool:
        """Call every handler with ``args``.

        ``args`` may be omitted when the payload type is :class:`EventArgs`; a
        fresh instance is created. Otherwise it must be an instance of the
        payload type, or :class:`ArgsTypeError` is raised. An Event without
        subscribers returns ``False`` before the payload is checked.

        ``event_name`` and ``when_occurred`` are stamped on the payload before
        delivery. Returns ``True`` if there were subscribers, ``False`` if the
        broadcast had no effect.
        """

        if not self._handlers:
            return False
        args = self._validate(args)

        args.event_name = self._name
        args.when_occurred = datetime.now(timezone.utc)

        handlers = tuple(self._handlers)
        LOGGER.debug("Broadcasting %s to %d subscriber(s)", self, len(handlers))
        for handler in handlers:
            handler(args)
        return True

    def notify_subscribers(self, args: Optional[A] = None) -> bool:
        """Equivalent to :meth:`broadcast`."""

        return self.broadcast(args)

    def _validate(self, args: Optional[A]) -> A:
        expected = self.args_type
        if args is None:
            if expected is not EventArgs:
                raise ArgsTypeError(expected)
            return EventArgs()  # type: ignore[return-value]
        if not isinstance(args, expected):
            raise ArgsTypeError(expected)
        return args

    def __str__(self) -> str:
        return f"{self._name or 'Unnamed'}:Event<{self.args_type.__name__}>"


__all__ = ["Event", "EventHandler", "EventSink"]
