"""Log file discovery across client installation layouts.

Each platform gets its own candidate provider; the resolver itself never
branches on the operating system.
"""

import logging
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

LOG_FILENAME = "latest.log"

# Alternate launcher layout, identical on every platform below its root
LUNAR_LOG = Path(".lunarclient", "offline", "multiver", "logs", LOG_FILENAME)


class CandidateProvider(Protocol):
    """Produces the ordered candidate log paths for one host platform."""

    name: str

    def candidates(self) -> list[Path]:
        """Return candidate paths in priority order, or [] if the root is unknown."""
        ...


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        logger.debug(f"Home directory lookup failed: {e}")
        return None


class WindowsCandidates:
    """Candidates rooted at %APPDATA%."""

    name = "windows"

    def __init__(self, env: Mapping[str, str] | None = None):
        self.env = os.environ if env is None else env

    def candidates(self) -> list[Path]:
        appdata = self.env.get("APPDATA")
        if not appdata:
            logger.debug("APPDATA is not set")
            return []
        root = Path(appdata)
        return [
            root / ".minecraft" / "logs" / LOG_FILENAME,
            root / LUNAR_LOG,
        ]


class MacOSCandidates:
    """Candidates rooted at the user's home directory (macOS layout)."""

    name = "macos"

    def __init__(self, home: Callable[[], Path | None] = _home_dir):
        self.home = home

    def candidates(self) -> list[Path]:
        home = self.home()
        if home is None:
            return []
        return [
            home / "Library" / "Application Support" / "minecraft" / "logs" / LOG_FILENAME,
            home / LUNAR_LOG,
        ]


class LinuxCandidates:
    """Candidates rooted at the user's home directory (Linux and other Unix)."""

    name = "linux"

    def __init__(self, home: Callable[[], Path | None] = _home_dir):
        self.home = home

    def candidates(self) -> list[Path]:
        home = self.home()
        if home is None:
            return []
        return [
            home / ".minecraft" / "logs" / LOG_FILENAME,
            home / LUNAR_LOG,
        ]


def get_candidate_provider(platform: str | None = None) -> CandidateProvider:
    """Pick the candidate provider for a platform.

    Args:
        platform: A ``sys.platform`` value (defaults to the running host)

    Returns:
        Provider instance for that platform
    """
    platform = sys.platform if platform is None else platform
    if platform.startswith("win") or platform == "cygwin":
        return WindowsCandidates()
    if platform == "darwin":
        return MacOSCandidates()
    return LinuxCandidates()


class PathResolver:
    """Stateless resolver over an ordered list of candidate paths.

    Cheap enough to be called repeatedly while the log file does not exist yet.
    """

    def __init__(
        self,
        provider: CandidateProvider | None = None,
        extra_paths: Sequence[Path] = (),
    ):
        """Initialize resolver.

        Args:
            provider: Platform candidate provider (defaults to the host's)
            extra_paths: Additional candidates tried after the platform defaults
        """
        self.provider = provider or get_candidate_provider()
        self.extra_paths = [Path(p) for p in extra_paths]

    def list_candidates(self) -> list[Path]:
        """All candidates in priority order, without existence filtering."""
        return self.provider.candidates() + self.extra_paths

    def resolve(self) -> Path | None:
        """Return the first candidate that exists, or None."""
        for candidate in self.list_candidates():
            if candidate.exists():
                return candidate
        return None

    @staticmethod
    def is_valid(path: str | Path) -> bool:
        """Check whether an arbitrary path exists."""
        if not path:
            return False
        return Path(path).exists()
