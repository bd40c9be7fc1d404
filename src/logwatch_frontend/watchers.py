"""Watcher configuration and the abstract change source protocol."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from logwatch_frontend.models import RawChange


@dataclass
class WatcherConfig:
    """Timing and discovery settings for a watch session."""

    retry_interval: float = 5.0
    """Seconds to sleep between path resolution attempts."""

    receive_timeout: float = 3.0
    """Seconds to block waiting for a change signal before looping."""

    debounce: float = 2.0
    """Minimum seconds between two content emissions."""

    poll_interval: float = 2.0
    """Polling period when the polling observer is used."""

    use_polling: bool = False
    """Use watchdog's polling observer instead of the native one."""

    extra_paths: list[Path] = field(default_factory=list)
    """Additional candidate log files, tried after the platform defaults."""


class ChangeSource(Protocol):
    """Protocol for filesystem change notification sources."""

    def arm(self, directory: Path) -> None:
        """Start delivering changes for files in directory (non-recursive).

        Raises:
            WatchInitError: If the underlying watcher cannot be started
        """
        ...

    def get(self, timeout: float) -> RawChange | None:
        """Wait for the next change signal.

        Returns:
            The next signal, or None if the timeout elapsed

        Raises:
            ChannelClosed: If the source has been closed
        """
        ...

    def close(self) -> None:
        """Stop watching and close the channel."""
        ...
