"""Non-Textual controller for log watching. Primary embed point."""

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from logwatch_frontend.commands import LogCommands
from logwatch_frontend.config import load_watcher_config
from logwatch_frontend.models import WatchState
from logwatch_frontend.notifier import EventSink, NoOpSink
from logwatch_frontend.paths import PathResolver
from logwatch_frontend.watch_loop import WatchLoop
from logwatch_frontend.watchers import WatcherConfig

logger = logging.getLogger(__name__)


class LogWatchController:
    """Owns one watch session and the on-demand command surface.

    The watch loop is started explicitly with start() and runs on a daemon
    thread until it reaches a terminal state or the process exits. One session
    per controller; create a new controller to watch again after termination.
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        sink: EventSink | None = None,
        resolver: PathResolver | None = None,
        config: WatcherConfig | None = None,
    ):
        """Initialize controller.

        Args:
            config_path: Optional TOML config with a [watch] table
            sink: Notification handler (defaults to NoOpSink - silent)
            resolver: Path resolver (defaults to the host platform's candidates)
            config: Explicit watcher settings, takes precedence over config_path
        """
        self.config_path = Path(config_path) if config_path else None

        if config is not None:
            self.config = config
        elif self.config_path is not None:
            try:
                self.config = load_watcher_config(self.config_path)
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise
        else:
            self.config = WatcherConfig()

        self.sink = sink or NoOpSink()
        self.resolver = resolver or PathResolver(extra_paths=self.config.extra_paths)
        self.commands = LogCommands(self.resolver, self.sink)

        self._loop: WatchLoop | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

        # Outbound event (host wires this); called from the watcher thread
        self.on_terminated: Callable[[WatchState], None] | None = None

    def start(self) -> None:
        """Start the background watch loop.

        Idempotent - a second call while a session exists does nothing.
        """
        with self._lock:
            if self._thread is not None:
                return

            self._loop = WatchLoop(self.resolver, self.sink, self.config)
            self._thread = threading.Thread(target=self._run, name="logwatch", daemon=True)
            self._thread.start()
            logger.info("Watch session started")

    def _run(self) -> None:
        try:
            state = self._loop.run()
        except Exception as e:
            logger.error(f"Watch loop crashed: {e}", exc_info=True)
            self.sink.notify_error(f"Watcher crashed: {e}")
            state = self._loop.state = WatchState.FAILED
        logger.info(f"Watch session ended ({state.value})")
        if self.on_terminated:
            self.on_terminated(state)

    def stop(self) -> None:
        """Close the armed change source, which ends the loop once it is watching.

        A loop that is still searching keeps retrying until it finds the file.
        """
        if self._loop is not None and self._loop.source is not None:
            self._loop.source.close()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the watch thread to finish."""
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def state(self) -> WatchState | None:
        """Current loop state, None before start()."""
        return self._loop.state if self._loop else None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # On-demand commands, safe to call while the loop runs

    def get_log_content(self) -> str:
        return self.commands.get_log_content()

    def get_log_location(self) -> str:
        return self.commands.get_log_location()

    def get_default_paths(self) -> list[str]:
        return self.commands.get_default_paths()

    def validate_path(self, path: str) -> bool:
        return self.commands.validate_path(path)

    def watch_path(self, path: str) -> None:
        self.commands.watch_path(path)
