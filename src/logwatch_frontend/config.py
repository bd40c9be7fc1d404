"""Configuration parsing for logwatch frontends."""

import logging
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from logwatch_frontend.watchers import WatcherConfig

logger = logging.getLogger(__name__)

_FLOAT_KEYS = ("retry_interval", "receive_timeout", "debounce", "poll_interval")


def load_watcher_config(path: str | Path) -> WatcherConfig:
    """Load watcher settings from a TOML file.

    Only the ``[watch]`` table is read; missing keys keep their defaults.

    Args:
        path: Path to TOML config file

    Returns:
        Populated WatcherConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed or holds invalid values
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except Exception as e:
        raise ValueError(f"Failed to parse config file {path}: {e}") from e

    watch_raw = raw.get("watch", {})
    if not isinstance(watch_raw, dict):
        raise ValueError(f"[watch] must be a table in {path}")

    config = WatcherConfig()

    for key in _FLOAT_KEYS:
        if key not in watch_raw:
            continue
        value = watch_raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"'{key}' must be a non-negative number, got {value!r}")
        setattr(config, key, float(value))

    if "use_polling" in watch_raw:
        config.use_polling = bool(watch_raw["use_polling"])

    for entry in watch_raw.get("extra_paths", []):
        if not entry:
            continue
        candidate = Path(entry).expanduser()
        # Relative paths are taken from the config file's directory
        if not candidate.is_absolute():
            candidate = path.parent / candidate
        config.extra_paths.append(candidate)

    logger.debug(f"Loaded watcher config from {path}: {config}")
    return config
