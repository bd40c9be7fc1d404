"""Change source implementation using watchdog."""

import logging
import os
import queue
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.polling import PollingObserver

from logwatch_frontend.errors import ChannelClosed, WatchInitError
from logwatch_frontend.models import RawChange
from logwatch_frontend.watchers import WatcherConfig

logger = logging.getLogger(__name__)

# Queue marker for a closed channel
_CLOSED = object()


class _QueueingHandler(FileSystemEventHandler):
    """Forwards file writes, creations, moves and deletions into a queue as RawChange.

    Opened and closed-without-write events are not forwarded; reading the log
    produces them, so forwarding them would make every read trigger another.
    """

    def __init__(self, events: queue.Queue):
        self.events = events

    def on_modified(self, event: FileSystemEvent) -> None:
        self._forward(event)

    def on_created(self, event: FileSystemEvent) -> None:
        self._forward(event)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._forward(event)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._forward(event)

    def on_closed(self, event: FileSystemEvent) -> None:
        """Closed after write."""
        self._forward(event)

    def _forward(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return

        try:
            paths = [Path(os.fsdecode(event.src_path))]
            dest = getattr(event, "dest_path", "")
            if dest:
                paths.append(Path(os.fsdecode(dest)))
        except Exception as e:
            self.events.put(RawChange(error=f"Bad event from watcher: {e}"))
            return

        self.events.put(RawChange(paths=tuple(paths)))


class WatchdogChangeSource:
    """Non-recursive directory watch delivering RawChange signals through a queue."""

    def __init__(self, config: WatcherConfig | None = None):
        """Initialize change source.

        Args:
            config: Watcher settings (observer type and poll interval)
        """
        self.config = config or WatcherConfig()
        self.events: queue.Queue = queue.Queue()
        self.observer = None
        self._closed = False

    def _make_observer(self):
        if self.config.use_polling:
            return PollingObserver(timeout=self.config.poll_interval)
        return Observer()

    def arm(self, directory: Path) -> None:
        """Start watching directory.

        Raises:
            WatchInitError: If the observer cannot be created or scheduled
        """
        if self._closed:
            raise WatchInitError("Watcher closed before arming")
        if self.observer is not None:
            raise WatchInitError("Watcher already armed")

        try:
            observer = self._make_observer()
        except Exception as e:
            raise WatchInitError(f"Watcher error: {e}") from e

        try:
            observer.schedule(_QueueingHandler(self.events), str(directory), recursive=False)
            observer.start()
        except Exception as e:
            raise WatchInitError(f"Watch error: {e}") from e

        self.observer = observer
        logger.info(f"Watching {directory} ({type(observer).__name__})")

    def get(self, timeout: float) -> RawChange | None:
        """Wait up to timeout seconds for the next signal.

        Raises:
            ChannelClosed: If close() was called or the observer thread died
        """
        try:
            item = self.events.get(timeout=timeout)
        except queue.Empty:
            if self.observer is not None and not self.observer.is_alive() and not self._closed:
                raise ChannelClosed("Watcher thread stopped")
            return None

        if item is _CLOSED:
            # Keep the marker so later calls also see the closed channel
            self.events.put(_CLOSED)
            raise ChannelClosed("Watcher closed")
        return item

    def close(self) -> None:
        """Stop the observer and close the channel."""
        if self._closed:
            return
        self._closed = True

        if self.observer is not None and self.observer.is_alive():
            self.observer.stop()
            self.observer.join(timeout=2.0)
            logger.info("Stopped file watcher")

        self.events.put(_CLOSED)
