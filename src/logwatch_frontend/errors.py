"""Error taxonomy for logwatch_frontend.

On-demand commands raise these synchronously. The watch loop never raises them
to a caller; it turns them into ``log-error`` notifications instead.
"""


class LogWatchError(Exception):
    """Base class for all log watching errors."""


class PathNotFound(LogWatchError):
    """No candidate log file exists (recoverable, retried by the loop)."""


class ReadError(LogWatchError):
    """The log file exists but could not be read or decoded."""


class WatchInitError(LogWatchError):
    """The change notification source could not be armed."""


class ChannelClosed(LogWatchError):
    """The change notification source closed its channel."""
