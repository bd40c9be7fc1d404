"""Textual viewer for the watched log file.

Watch events arrive on the watcher thread and are turned into Textual
messages; post_message is thread-safe, so the loop never waits on the UI.
"""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Footer, Header, Log, Static

from logwatch_frontend.duels import format_seconds, parse_duels
from logwatch_frontend.errors import LogWatchError
from textual_logwatch.controller import LogWatchController

logger = logging.getLogger(__name__)


class LogLocation(Message):
    """The log file was found."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path


class LogUpdate(Message):
    """New full log content."""

    def __init__(self, content: str) -> None:
        super().__init__()
        self.content = content


class LogError(Message):
    """Watcher error text."""

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message


class AppEventSink:
    """EventSink that forwards watch events into an App's message queue."""

    def __init__(self, app: App):
        self.app = app

    def notify_location(self, path: str) -> None:
        self.app.post_message(LogLocation(path))

    def notify_content(self, content: str) -> None:
        self.app.post_message(LogUpdate(content))

    def notify_error(self, message: str) -> None:
        self.app.post_message(LogError(message))


def describe_latest_game(content: str) -> str:
    """One-line standings of the newest Parkour Duels game in the log."""
    duels = parse_duels(content)
    game = duels.latest
    if game is None:
        return ""

    standings = []
    for player in game.ranking():
        done = game.finish(player)
        if done is not None:
            standings.append(f"{player} {format_seconds(done.seconds)}")
        else:
            standings.append(f"{player} cp {game.players[player][-1].checkpoint}")
    return f"Game {len(duels.games)}: " + ", ".join(standings)


class LogWatchApp(App):
    """Live view of the game log: location line, error line, latest duel, log text."""

    TITLE = "logwatch"
    BINDINGS = [
        Binding("r", "refresh_log", "Refresh"),
        Binding("c", "show_candidates", "Candidates"),
        Binding("q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }

    #location {
        height: 1;
        color: $accent;
    }

    #error {
        height: auto;
        color: $error;
    }

    #duel {
        height: auto;
        color: $success;
    }

    #log-view {
        height: 1fr;
        border: solid $accent;
    }
    """

    # True between a log-location and the next log-error; shown in the header
    watching = reactive(False)

    def __init__(
        self,
        controller: LogWatchController | None = None,
        config_path: str | Path | None = None,
        probe_path: str | None = None,
        **kwargs,
    ):
        """Initialize app.

        Args:
            controller: Pre-built controller (a new one is created if omitted)
            config_path: Optional TOML config for a new controller
            probe_path: Path to announce via watch_path() once mounted
        """
        super().__init__(**kwargs)
        self.controller = controller or LogWatchController(config_path, sink=AppEventSink(self))
        self.probe_path = probe_path

        self.current_location: str | None = None
        self.last_error: str | None = None
        self.shown_content = ""
        self.duel_summary = ""

    def compose(self) -> ComposeResult:
        """Compose app layout."""
        yield Header()
        yield Static("Searching for log file...", id="location")
        yield Static("", id="error")
        yield Static("", id="duel")
        yield Log(id="log-view", highlight=False)
        yield Footer()

    def watch_watching(self, watching: bool) -> None:
        self.sub_title = "● live" if watching else "not watching"

    def on_mount(self) -> None:
        """Start the watch session and probe an explicit path if given."""
        self.controller.start()

        if self.probe_path:
            try:
                self.controller.watch_path(self.probe_path)
            except LogWatchError as e:
                self._show_error(f"{self.probe_path}: {e}")

    def on_log_location(self, message: LogLocation) -> None:
        self.current_location = message.path
        self.watching = True
        self.last_error = None
        self.query_one("#location", Static).update(f"Watching: {message.path}")
        self.query_one("#error", Static).update("")

    def on_log_update(self, message: LogUpdate) -> None:
        self._show_content(message.content)

    def on_log_error(self, message: LogError) -> None:
        self.watching = False
        self._show_error(message.message)

    def _show_error(self, text: str) -> None:
        self.last_error = text
        self.query_one("#error", Static).update(f"⚠️ {text}")

    def _show_content(self, content: str) -> None:
        """Render full content, appending only the tail when the log just grew."""
        log = self.query_one("#log-view", Log)
        if self.shown_content and content.startswith(self.shown_content):
            log.write(content[len(self.shown_content):])
        else:
            log.clear()
            log.write(content)
        self.shown_content = content
        self.duel_summary = describe_latest_game(content)
        self.query_one("#duel", Static).update(self.duel_summary)

    def action_refresh_log(self) -> None:
        """Re-read the log on demand."""
        try:
            content = self.controller.get_log_content()
        except LogWatchError as e:
            self._show_error(str(e))
            return
        self._show_content(content)

    def action_show_candidates(self) -> None:
        """Show where the log file is looked for."""
        paths = self.controller.get_default_paths()
        if not paths:
            self.notify("No candidate paths for this platform", severity="warning")
            return
        self.notify("\n".join(paths), title="Candidate log paths", timeout=10)

    def on_unmount(self) -> None:
        """Cleanup on exit."""
        self.controller.stop()
