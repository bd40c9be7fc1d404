"""CLI entry point for logwatch-tui: find the game log and follow it."""

import argparse
import logging
import sys
from pathlib import Path

from textual.logging import TextualHandler

from logwatch_frontend.models import EVENT_ERROR, EVENT_LOCATION, EVENT_UPDATE, WatchState
from textual_logwatch import __version__
from textual_logwatch.app import LogWatchApp
from textual_logwatch.controller import LogWatchController

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "logwatch.toml"

# Written by --init-config; every key shows its default
DEFAULT_CONFIG_TEMPLATE = """\
# Auto-generated logwatch.toml for logwatch-tui

[watch]
retry_interval = 5.0   # seconds between searches while no log exists
receive_timeout = 3.0  # seconds to wait for a change signal per iteration
debounce = 2.0         # minimum seconds between two updates
poll_interval = 2.0    # only used with use_polling
use_polling = false    # poll instead of native notifications (network drives)

# Extra log files to try after the built-in locations.
# Relative paths are resolved against this file.
extra_paths = []
"""


def create_default_config(config_path: Path) -> bool:
    """
    Create a default logwatch.toml if it doesn't exist.

    Args:
        config_path: Path where config should be created

    Returns:
        True if config was created, False if it already exists

    Raises:
        PermissionError: If unable to write to the directory
        OSError: If other file system errors occur
    """
    if config_path.exists():
        return False

    # Ensure parent directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_path.write_text(DEFAULT_CONFIG_TEMPLATE)
    return True


class ConsoleSink:
    """EventSink printing one line per event, for --headless."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def _print(self, event: str, text: str) -> None:
        print(f"[{event}] {text}", file=self.stream, flush=True)

    def notify_location(self, path: str) -> None:
        self._print(EVENT_LOCATION, path)

    def notify_content(self, content: str) -> None:
        lines = content.splitlines()
        last = lines[-1] if lines else ""
        self._print(EVENT_UPDATE, f"{len(content)} chars, {len(lines)} lines | {last}")

    def notify_error(self, message: str) -> None:
        self._print(EVENT_ERROR, message)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="logwatch-tui",
        description="Follow the Minecraft / Lunar Client latest.log in real time.",
        epilog="Examples:\n"
        "  logwatch-tui                          # Find the log and open the viewer\n"
        "  logwatch-tui --headless               # Print events instead of a UI\n"
        "  logwatch-tui --path ~/logs/latest.log # Announce a specific file\n"
        "  logwatch-tui --list-candidates        # Show where the log is looked for",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help=f"Path to config file (default: {DEFAULT_CONFIG_NAME} if present)",
    )

    parser.add_argument("--path", default=None, help="Log file to announce once started")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--list-candidates",
        action="store_true",
        help="Print candidate log paths and exit",
    )
    mode.add_argument("--validate", metavar="PATH", default=None, help="Check that PATH exists and exit")
    mode.add_argument("--headless", action="store_true", help="Print events to stdout instead of the TUI")
    mode.add_argument(
        "--init-config",
        action="store_true",
        help=f"Write a default config (to --config or ./{DEFAULT_CONFIG_NAME}) and exit",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def resolve_config_path(value: str | None) -> Path | None:
    """Pick the config file to load.

    An explicit path must exist. Without one, ./logwatch.toml is used if present.

    Raises:
        FileNotFoundError: If an explicit path does not exist
    """
    if value:
        path = Path(value).expanduser().resolve()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path

    default = Path(DEFAULT_CONFIG_NAME).resolve()
    return default if default.exists() else None


def run_headless(controller) -> int:
    """Run the watch loop in the foreground until it terminates."""
    controller.start()
    controller.join()
    return 0 if controller.state == WatchState.ABORTED else 1


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point for logwatch-tui CLI.

    Handles:
    - Argument parsing
    - Default config creation (--init-config)
    - One-shot queries (--list-candidates, --validate)
    - Headless or TUI watching
    - Error handling and exit codes
    """
    args = parse_args(argv)

    # Plain stderr logging would draw over the TUI
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=None if args.headless else [TextualHandler()],
    )

    try:
        if args.init_config:
            target = Path(args.config or DEFAULT_CONFIG_NAME).expanduser().resolve()
            if create_default_config(target):
                print(f"Created default config at: {target}")
            else:
                print(f"Config already exists: {target}")
            sys.exit(0)

        config_path = resolve_config_path(args.config)

        if args.list_candidates:
            controller = LogWatchController(config_path)
            for path in controller.get_default_paths():
                print(path)
            sys.exit(0)

        if args.validate is not None:
            controller = LogWatchController(config_path)
            valid = controller.validate_path(args.validate)
            print("true" if valid else "false")
            sys.exit(0 if valid else 1)

        if args.headless:
            sink = ConsoleSink()
            controller = LogWatchController(config_path, sink=sink)
            if args.path:
                controller.watch_path(args.path)
            sys.exit(run_headless(controller))

        app = LogWatchApp(config_path=config_path, probe_path=args.path)
        app.run()

    except KeyboardInterrupt:
        # Gracefully handle Ctrl+C
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
