"""logwatch-frontend: UI-agnostic log discovery and watching for logwatch frontends."""

__version__ = "0.1.0"

# Models
from logwatch_frontend.models import (
    EVENT_ERROR,
    EVENT_LOCATION,
    EVENT_UPDATE,
    FileSnapshot,
    RawChange,
    WatchSession,
    WatchState,
)

# Errors
from logwatch_frontend.errors import (
    ChannelClosed,
    LogWatchError,
    PathNotFound,
    ReadError,
    WatchInitError,
)

# Discovery and change detection
from logwatch_frontend.paths import PathResolver, get_candidate_provider
from logwatch_frontend.snapshot import fingerprint, read_snapshot

# Notification
from logwatch_frontend.notifier import CallbackSink, EventSink, LoggingSink, NoOpSink, QueueSink

# Watching
from logwatch_frontend.watchers import ChangeSource, WatcherConfig
from logwatch_frontend.watch_loop import WatchLoop
from logwatch_frontend.commands import LogCommands

# Parkour Duels
from logwatch_frontend.duels import DuelGame, DuelLog, Split, parse_duels

# Config
from logwatch_frontend.config import load_watcher_config

__all__ = [
    "__version__",
    # Models
    "EVENT_LOCATION",
    "EVENT_UPDATE",
    "EVENT_ERROR",
    "FileSnapshot",
    "RawChange",
    "WatchSession",
    "WatchState",
    # Errors
    "LogWatchError",
    "PathNotFound",
    "ReadError",
    "WatchInitError",
    "ChannelClosed",
    # Discovery
    "PathResolver",
    "get_candidate_provider",
    "fingerprint",
    "read_snapshot",
    # Notification
    "EventSink",
    "NoOpSink",
    "LoggingSink",
    "QueueSink",
    "CallbackSink",
    # Watching
    "ChangeSource",
    "WatcherConfig",
    "WatchLoop",
    "LogCommands",
    # Parkour Duels
    "DuelGame",
    "DuelLog",
    "Split",
    "parse_duels",
    # Config
    "load_watcher_config",
]
