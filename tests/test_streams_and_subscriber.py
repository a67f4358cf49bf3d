from __future__ import annotations

import asyncio
import queue

import pytest

from typed_event import Event, EventSubscriber, InvalidArgumentError, Value


def test_subscribe_stream_forwards_into_queue() -> None:
    event = Event("stream", args_type=Value)
    sink: queue.Queue = queue.Queue()

    event.subscribe_stream(sink)
    event.broadcast(Value("a"))
    event.broadcast(Value("b"))

    first, second = sink.get_nowait(), sink.get_nowait()
    assert (first.value, second.value) == ("a", "b")
    assert first.event_name == "stream"
    assert sink.empty()


def test_subscribe_stream_with_asyncio_queue() -> None:
    async def main() -> str:
        event = Event("async")
        sink: asyncio.Queue = asyncio.Queue()
        event.subscribe_stream(sink)
        event.broadcast()
        args = await asyncio.wait_for(sink.get(), timeout=1)
        return args.event_name

    assert asyncio.run(main()) == "async"


def test_stream_handler_can_be_unsubscribed() -> None:
    event = Event()
    sink: queue.Queue = queue.Queue()

    forward = event.subscribe_stream(sink)
    assert event.subscriber_count == 1
    assert event.unsubscribe(forward) is True

    assert event.broadcast() is False
    assert sink.empty()


def test_stream_and_plain_handlers_keep_order() -> None:
    event = Event()
    sink: queue.Queue = queue.Queue()
    seen = []

    event.subscribe(lambda args: seen.append(sink.qsize()))
    event.subscribe_stream(sink)
    event.subscribe(lambda args: seen.append(sink.qsize()))
    event.broadcast()

    assert seen == [0, 1]


@pytest.mark.parametrize("sink", [None, object(), []])
def test_subscribe_stream_rejects_non_sink(sink) -> None:
    event = Event()
    with pytest.raises(InvalidArgumentError):
        event.subscribe_stream(sink)
    assert event.subscriber_count == 0


def test_subscriber_view_delegates_to_event() -> None:
    event = Event("public", args_type=Value)
    view = event.subscriber()
    received = []

    assert isinstance(view, EventSubscriber)
    view.subscribe(received.append)
    assert view.subscriber_count == 1
    assert event.subscriber_count == 1

    event.broadcast(Value(1))
    assert received[0].value == 1

    assert view.unsubscribe(received.append) is True
    assert view.subscriber_count == 0
    assert view.name == "public"
    assert view.args_type is Value
    assert str(view) == "public:Event<Value>"


def test_subscriber_view_cannot_broadcast() -> None:
    view = EventSubscriber(Event())
    assert not hasattr(view, "broadcast")
    assert not hasattr(view, "notify_subscribers")
    assert not hasattr(view, "unsubscribe_all")


def test_subscriber_view_stream() -> None:
    event = Event()
    sink: queue.Queue = queue.Queue()
    event.subscriber().subscribe_stream(sink)
    event.broadcast()
    assert sink.qsize() == 1
