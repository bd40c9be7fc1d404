"""Tests for watcher config loading."""

from pathlib import Path

import pytest

from logwatch_frontend.config import load_watcher_config
from logwatch_frontend.watchers import WatcherConfig


def test_defaults():
    """Test WatcherConfig defaults match the documented timings."""
    config = WatcherConfig()
    assert config.retry_interval == 5.0
    assert config.receive_timeout == 3.0
    assert config.debounce == 2.0
    assert config.poll_interval == 2.0
    assert config.use_polling is False
    assert config.extra_paths == []


def test_load_full_config(tmp_path):
    """Test every [watch] key is read."""
    path = tmp_path / "logwatch.toml"
    path.write_text(
        """
[watch]
retry_interval = 1
receive_timeout = 0.5
debounce = 0.25
poll_interval = 1.5
use_polling = true
extra_paths = ["logs/latest.log", "/opt/prism/instances/main/logs/latest.log"]
"""
    )
    config = load_watcher_config(path)

    assert config.retry_interval == 1.0
    assert config.receive_timeout == 0.5
    assert config.debounce == 0.25
    assert config.poll_interval == 1.5
    assert config.use_polling is True
    assert config.extra_paths == [
        tmp_path / "logs" / "latest.log",
        Path("/opt/prism/instances/main/logs/latest.log"),
    ]


def test_missing_table_keeps_defaults(tmp_path):
    """Test a config without [watch] yields defaults."""
    path = tmp_path / "logwatch.toml"
    path.write_text("# nothing here\n")
    assert load_watcher_config(path) == WatcherConfig()


def test_missing_file(tmp_path):
    """Test an explicit missing file is reported."""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_watcher_config(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path):
    """Test parse errors become ValueError."""
    path = tmp_path / "logwatch.toml"
    path.write_text("[watch\n")
    with pytest.raises(ValueError, match="Failed to parse config file"):
        load_watcher_config(path)


@pytest.mark.parametrize("value", ['"fast"', "-1", "true"])
def test_invalid_timing(tmp_path, value):
    """Test non-numeric or negative timings are rejected."""
    path = tmp_path / "logwatch.toml"
    path.write_text(f"[watch]\ndebounce = {value}\n")
    with pytest.raises(ValueError, match="'debounce' must be a non-negative number"):
        load_watcher_config(path)
