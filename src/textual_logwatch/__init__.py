"""textual-logwatch: Textual viewer and embeddable controller for live game logs."""

__version__ = "0.1.0"

# Public API
from textual_logwatch.controller import LogWatchController

__all__ = [
    "__version__",
    # Primary components
    "LogWatchController",
]
