"""On-demand command surface.

Each call does its own fresh filesystem work and never touches the watch
loop's session, so all of them are safe to call while the loop runs.
"""

import logging
from pathlib import Path

from logwatch_frontend.errors import PathNotFound, ReadError
from logwatch_frontend.notifier import EventSink, NoOpSink
from logwatch_frontend.paths import PathResolver
from logwatch_frontend.snapshot import read_content
from logwatch_frontend.watch_loop import NOT_FOUND_MESSAGE

logger = logging.getLogger(__name__)


class LogCommands:
    """Synchronous request/response operations for the presentation layer."""

    def __init__(self, resolver: PathResolver | None = None, sink: EventSink | None = None):
        """Initialize commands.

        Args:
            resolver: Candidate path resolver (defaults to the host platform's)
            sink: Sink used by watch_path() announcements
        """
        self.resolver = resolver or PathResolver()
        self.sink = sink or NoOpSink()

    def _require_path(self) -> Path:
        path = self.resolver.resolve()
        if path is None:
            raise PathNotFound(NOT_FOUND_MESSAGE)
        return path

    def get_log_content(self) -> str:
        """Full text of the resolved log file.

        Raises:
            PathNotFound: If no candidate exists
            ReadError: If the file cannot be read
        """
        return read_content(self._require_path())

    def get_log_location(self) -> str:
        """Resolved log file path.

        Raises:
            PathNotFound: If no candidate exists
        """
        return str(self._require_path())

    def get_default_paths(self) -> list[str]:
        """Platform candidate paths in priority order (best effort)."""
        return [str(p) for p in self.resolver.list_candidates() if str(p)]

    def validate_path(self, path: str) -> bool:
        """Check whether a caller-supplied path exists."""
        return self.resolver.is_valid(path)

    def watch_path(self, path: str) -> None:
        """Announce a caller-supplied log file to the sink.

        Emits ``log-location`` and, if the file is readable, ``log-update``.
        Does not change what the background loop watches.

        Raises:
            PathNotFound: If the path does not exist
        """
        if not self.resolver.is_valid(path):
            raise PathNotFound("File not found")

        self.sink.notify_location(path)
        try:
            content = read_content(path)
        except ReadError as e:
            logger.warning(f"Probed path {path} is not readable: {e}")
            return
        self.sink.notify_content(content)
