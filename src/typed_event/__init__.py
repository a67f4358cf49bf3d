"""typed-event: synchronous, typed publish/subscribe events."""

from .args import EventArgs, Value, Values, WhenWhy
from .config import LoggingSettings, load_logging_settings
from .event import Event, EventHandler, EventSink
from .exceptions import ArgsTypeError, EventError, InvalidArgumentError
from .logging import configure_logging, get_logger
from .subscriber import EventSubscriber

__all__ = [
    "ArgsTypeError",
    "Event",
    "EventArgs",
    "EventError",
    "EventHandler",
    "EventSink",
    "EventSubscriber",
    "InvalidArgumentError",
    "LoggingSettings",
    "Value",
    "Values",
    "WhenWhy",
    "configure_logging",
    "get_logger",
    "load_logging_settings",
]
