"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from logwatch_frontend.errors import ChannelClosed, WatchInitError  # noqa: E402
from logwatch_frontend.models import RawChange  # noqa: E402
from logwatch_frontend.paths import PathResolver  # noqa: E402


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StaticCandidates:
    """Candidate provider returning a fixed list."""

    name = "test"

    def __init__(self, paths):
        self.paths = [Path(p) for p in paths]

    def candidates(self) -> list[Path]:
        return list(self.paths)


class RecordingSink:
    """EventSink recording ``(event_name, payload)`` tuples in order."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def notify_location(self, path: str) -> None:
        self.events.append(("log-location", path))

    def notify_content(self, content: str) -> None:
        self.events.append(("log-update", content))

    def notify_error(self, message: str) -> None:
        self.events.append(("log-error", message))

    def of(self, name: str) -> list[str]:
        return [payload for event, payload in self.events if event == name]


class ScriptedSource:
    """ChangeSource replaying a script of steps.

    Each step is a RawChange, None (timeout) or a callable run before the next
    step is read (used to touch files or advance the clock). When the script
    runs out the channel reports closed.
    """

    def __init__(self, steps: list, fail_arm: str | None = None):
        self.steps = list(steps)
        self.fail_arm = fail_arm
        self.armed: Path | None = None
        self.closed = False
        self.timeouts: list[float] = []

    def arm(self, directory: Path) -> None:
        if self.fail_arm:
            raise WatchInitError(self.fail_arm)
        self.armed = directory

    def get(self, timeout: float) -> RawChange | None:
        self.timeouts.append(timeout)
        while self.steps:
            step = self.steps.pop(0)
            if callable(step):
                step()
                continue
            return step
        raise ChannelClosed("script finished")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def log_dir(tmp_path) -> Path:
    """Directory laid out like a client's logs folder."""
    directory = tmp_path / ".minecraft" / "logs"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def log_file(log_dir) -> Path:
    return log_dir / "latest.log"


@pytest.fixture
def resolver(log_file, tmp_path) -> PathResolver:
    """Resolver whose primary candidate is log_file."""
    alternate = tmp_path / ".lunarclient" / "offline" / "multiver" / "logs" / "latest.log"
    return PathResolver(StaticCandidates([log_file, alternate]))


@pytest.fixture
def scripted_source():
    """Factory for ScriptedSource instances."""
    return ScriptedSource


@pytest.fixture
def static_candidates():
    """Factory for StaticCandidates providers."""
    return StaticCandidates
