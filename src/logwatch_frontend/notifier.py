"""Pluggable outbound event protocol for logwatch_frontend.

The watch loop only talks to an EventSink. Any transport (in-process queue,
callbacks, a UI message bus) can implement the three calls.
"""

import logging
import queue
import threading
from collections.abc import Callable
from typing import Protocol

from logwatch_frontend.models import EVENT_ERROR, EVENT_LOCATION, EVENT_NAMES, EVENT_UPDATE

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    """Protocol for one-way notifications - host can provide custom implementation.

    Calls are fire-and-forget and must return quickly.
    """

    def notify_location(self, path: str) -> None:
        """The log file was found at path."""
        ...

    def notify_content(self, content: str) -> None:
        """Full current log content."""
        ...

    def notify_error(self, message: str) -> None:
        """Human-readable error description."""
        ...


class NoOpSink:
    """Silent sink - default for embedded mode."""

    def notify_location(self, path: str) -> None:
        """Do nothing."""
        pass

    def notify_content(self, content: str) -> None:
        """Do nothing."""
        pass

    def notify_error(self, message: str) -> None:
        """Do nothing."""
        pass


class LoggingSink:
    """Implementation using stdlib logging - for debugging/development."""

    def notify_location(self, path: str) -> None:
        logger.info(f"{EVENT_LOCATION}: {path}")

    def notify_content(self, content: str) -> None:
        logger.info(f"{EVENT_UPDATE}: {len(content)} chars")

    def notify_error(self, message: str) -> None:
        logger.warning(f"{EVENT_ERROR}: {message}")


class QueueSink:
    """In-process channel: each event becomes an ``(event_name, payload)`` tuple."""

    def __init__(self, events: queue.Queue | None = None):
        self.events: queue.Queue = events if events is not None else queue.Queue()

    def notify_location(self, path: str) -> None:
        self.events.put((EVENT_LOCATION, path))

    def notify_content(self, content: str) -> None:
        self.events.put((EVENT_UPDATE, content))

    def notify_error(self, message: str) -> None:
        self.events.put((EVENT_ERROR, message))


class CallbackSink:
    """Callback registry keyed by event name.

    Usage:
        sink = CallbackSink()
        unlisten = sink.listen("log-update", lambda text: ...)
        ...
        unlisten()
    """

    def __init__(self):
        self._listeners: dict[str, list[Callable[[str], None]]] = {name: [] for name in EVENT_NAMES}
        self._lock = threading.Lock()

    def listen(self, event: str, callback: Callable[[str], None]) -> Callable[[], None]:
        """Register a callback for an event.

        Args:
            event: One of ``log-location``, ``log-update``, ``log-error``
            callback: Called with the event payload

        Returns:
            Function that removes the callback again

        Raises:
            ValueError: If the event name is unknown
        """
        if event not in self._listeners:
            raise ValueError(f"Unknown event '{event}'. Valid events: {', '.join(EVENT_NAMES)}")

        with self._lock:
            self._listeners[event].append(callback)

        def unlisten() -> None:
            with self._lock:
                if callback in self._listeners[event]:
                    self._listeners[event].remove(callback)

        return unlisten

    def _dispatch(self, event: str, payload: str) -> None:
        with self._lock:
            callbacks = list(self._listeners[event])
        for callback in callbacks:
            try:
                callback(payload)
            except Exception as e:
                logger.error(f"Listener for '{event}' failed: {e}")

    def notify_location(self, path: str) -> None:
        self._dispatch(EVENT_LOCATION, path)

    def notify_content(self, content: str) -> None:
        self._dispatch(EVENT_UPDATE, content)

    def notify_error(self, message: str) -> None:
        self._dispatch(EVENT_ERROR, message)
