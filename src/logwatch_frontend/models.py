"""Shared data models for logwatch_frontend."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Event names delivered to the presentation layer
EVENT_LOCATION = "log-location"
EVENT_UPDATE = "log-update"
EVENT_ERROR = "log-error"

EVENT_NAMES = (EVENT_LOCATION, EVENT_UPDATE, EVENT_ERROR)


class WatchState(Enum):
    """States of the watch loop."""

    SEARCHING = "searching"
    WATCHING = "watching"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class FileSnapshot:
    """Content of the log file at one read, with its fingerprint."""

    content: str
    """Full decoded file text."""

    fingerprint: int
    """64-bit fingerprint of the content."""


@dataclass(frozen=True)
class RawChange:
    """One signal delivered by a change source."""

    paths: tuple[Path, ...] = ()
    """Paths referenced by the filesystem event."""

    error: str | None = None
    """Set when the signal is an error from the notification source."""

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def touches(self, filename: str) -> bool:
        """Check whether any referenced path has the given file name.

        Args:
            filename: Bare file name, e.g. ``latest.log``

        Returns:
            True if one of the event paths ends in that name
        """
        return any(p.name == filename for p in self.paths)


@dataclass
class WatchSession:
    """Mutable state of one active watch. Owned by the watch loop only."""

    active_path: Path | None = None
    """Resolved log file, None while searching."""

    last_fingerprint: int = 0
    """Fingerprint of the last content delivered to the sink."""

    last_notify_time: float = 0.0
    """Monotonic time of the last content emission."""

    notifications: int = field(default=0, compare=False)
    """Number of content emissions so far (diagnostics only)."""

    @property
    def watched_filename(self) -> str | None:
        """File name that raw change signals are matched against."""
        return self.active_path.name if self.active_path else None
