#!/usr/bin/env python3
"""
Example: Headless Duel Tracker
Shows how to use LogWatchController without any UI.

This example demonstrates:
- Wiring a CallbackSink to the three log events
- Starting the watch session explicitly
- Parsing Parkour Duels results from full-content updates
- Using the on-demand commands next to the running loop
"""

import sys
import time

try:
    from logwatch_frontend import CallbackSink, LogWatchError, parse_duels
    from logwatch_frontend.duels import format_seconds
    from textual_logwatch import LogWatchController
except ImportError:
    print("Error: Install textual-logwatch first: pip install textual-logwatch")
    sys.exit(1)


class DuelTracker:
    """
    Print standings of the current Parkour Duels game as the log grows.

    Use case: overlays, stream widgets, stats bots.
    """

    def __init__(self):
        self.games = 0
        self.splits = 0
        self.location: str | None = None

    def on_location(self, path: str) -> None:
        self.location = path
        print(f"✓ Following {path}")

    def on_update(self, content: str) -> None:
        # Updates carry the whole file, so parse from scratch
        duels = parse_duels(content)
        game = duels.latest
        if game is None:
            return
        if len(duels.games) == self.games and game.split_count == self.splits:
            return
        self.games = len(duels.games)
        self.splits = game.split_count

        print(f"Game {self.games} vs {game.opponents or '?'}")
        for place, player in enumerate(game.ranking(), 1):
            done = game.finish(player)
            if done is not None:
                result = format_seconds(done.seconds)
            else:
                result = f"checkpoint {game.players[player][-1].checkpoint}"
            marker = " (you)" if player == duels.username else ""
            print(f"  {place}. {player}{marker}: {result}")

    def on_error(self, message: str) -> None:
        print(f"⚠️ {message}")


def main() -> None:
    tracker = DuelTracker()
    sink = CallbackSink()
    sink.listen("log-location", tracker.on_location)
    sink.listen("log-update", tracker.on_update)
    sink.listen("log-error", tracker.on_error)

    controller = LogWatchController(sink=sink)

    print("Looking in:")
    for path in controller.get_default_paths():
        print(f"  {path}")

    controller.start()

    try:
        while controller.is_running:
            time.sleep(1)
    except KeyboardInterrupt:
        controller.stop()

    # On-demand read, independent of the session
    try:
        print(f"Games in log: {len(parse_duels(controller.get_log_content()).games)}")
    except LogWatchError as e:
        print(f"No final read: {e}")


if __name__ == "__main__":
    main()
