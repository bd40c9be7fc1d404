"""The watch loop: find the log file, arm a change source, push debounced updates.

States:
    SEARCHING -> WATCHING -> FAILED | ABORTED

SEARCHING retries forever. FAILED and ABORTED are terminal; restarting a
session is up to whoever owns the loop.
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from logwatch_frontend.errors import ChannelClosed, ReadError, WatchInitError
from logwatch_frontend.file_watcher import WatchdogChangeSource
from logwatch_frontend.models import RawChange, WatchSession, WatchState
from logwatch_frontend.notifier import EventSink
from logwatch_frontend.paths import PathResolver
from logwatch_frontend.snapshot import read_snapshot
from logwatch_frontend.watchers import ChangeSource, WatcherConfig

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Minecraft log file not found"


class WatchLoop:
    """Long-running state machine driving one watch session.

    Runs on whatever thread calls run(); it is the only mutator of its
    WatchSession.
    """

    def __init__(
        self,
        resolver: PathResolver,
        sink: EventSink,
        config: WatcherConfig | None = None,
        source_factory: Callable[[], ChangeSource] | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize loop.

        Args:
            resolver: Candidate path resolver
            sink: Outbound notification channel
            config: Timing settings (defaults to WatcherConfig())
            source_factory: Builds the change source to arm (defaults to watchdog)
            clock: Monotonic time function
            sleep: Sleep function used between resolution attempts
        """
        self.resolver = resolver
        self.sink = sink
        self.config = config or WatcherConfig()
        self.source_factory = source_factory or (lambda: WatchdogChangeSource(self.config))
        self.clock = clock
        self.sleep = sleep

        self.session = WatchSession()
        self.state = WatchState.SEARCHING
        self.source: ChangeSource | None = None

    def _set_state(self, state: WatchState) -> None:
        if state != self.state:
            logger.info(f"Watch loop {self.state.value} -> {state.value}")
        self.state = state

    def run(self) -> WatchState:
        """Run until a terminal state is reached.

        Returns:
            The terminal state (FAILED or ABORTED)
        """
        self._set_state(WatchState.SEARCHING)
        path = self._search()
        self._enter_watching(path)

        source = self.source_factory()
        self.source = source
        try:
            source.arm(path.parent)
        except WatchInitError as e:
            logger.error(f"Could not arm watcher on {path.parent}: {e}")
            self.sink.notify_error(str(e))
            self._set_state(WatchState.FAILED)
            source.close()
            return self.state

        try:
            while True:
                try:
                    change = source.get(self.config.receive_timeout)
                except ChannelClosed:
                    self._set_state(WatchState.ABORTED)
                    return self.state

                if change is None:
                    continue
                self._handle_change(change)
        finally:
            source.close()

    def _search(self) -> Path:
        """Resolve the log path, retrying until a candidate exists."""
        attempts = 0
        while True:
            path = self.resolver.resolve()
            if path is not None:
                logger.info(f"Found log file after {attempts + 1} attempt(s): {path}")
                return path

            attempts += 1
            logger.debug(f"No log file found (attempt {attempts}), retrying in {self.config.retry_interval}s")
            self.sink.notify_error(NOT_FOUND_MESSAGE)
            self.sleep(self.config.retry_interval)

    def _enter_watching(self, path: Path) -> None:
        """Announce the location and emit the initial content (never debounced)."""
        self._set_state(WatchState.WATCHING)
        self.session.active_path = path
        self.sink.notify_location(str(path))

        try:
            snapshot = read_snapshot(path)
        except ReadError as e:
            logger.warning(f"Initial read of {path} failed: {e}")
        else:
            self.session.last_fingerprint = snapshot.fingerprint
            self._emit(snapshot.content)

        # The debounce window starts once the watch is set up
        self.session.last_notify_time = self.clock()

    def _handle_change(self, change: RawChange) -> None:
        """Process one raw signal while WATCHING."""
        if change.is_error:
            logger.debug(f"Ignoring watcher error: {change.error}")
            return

        if not change.touches(self.session.watched_filename):
            return

        if self.clock() - self.session.last_notify_time < self.config.debounce:
            logger.debug("Change inside debounce window, swallowed")
            return

        try:
            snapshot = read_snapshot(self.session.active_path)
        except ReadError as e:
            logger.debug(f"Skipping unreadable log: {e}")
            return

        if snapshot.fingerprint == self.session.last_fingerprint:
            return

        self.session.last_fingerprint = snapshot.fingerprint
        self.session.last_notify_time = self.clock()
        self._emit(snapshot.content)

    def _emit(self, content: str) -> None:
        self.session.notifications += 1
        self.sink.notify_content(content)
