"""Tests for the on-demand command surface."""

import pytest

from logwatch_frontend.commands import LogCommands
from logwatch_frontend.errors import PathNotFound, ReadError


@pytest.fixture
def commands(resolver, sink):
    return LogCommands(resolver, sink)


class TestQueries:
    """get_log_content / get_log_location / get_default_paths / validate_path."""

    def test_content_and_location(self, commands, log_file):
        """Test both resolve the same file on demand."""
        log_file.write_text("A\nB\n")
        assert commands.get_log_content() == "A\nB\n"
        assert commands.get_log_location() == str(log_file)

    def test_not_found(self, commands):
        """Test missing log raises PathNotFound with a readable message."""
        with pytest.raises(PathNotFound, match="not found"):
            commands.get_log_content()
        with pytest.raises(PathNotFound):
            commands.get_log_location()

    def test_read_error(self, commands, log_file):
        """Test an unreadable log raises ReadError."""
        log_file.mkdir()
        with pytest.raises(ReadError):
            commands.get_log_content()

    def test_fresh_read_each_call(self, commands, log_file):
        """Test every call reflects the file as it is now."""
        log_file.write_text("A")
        assert commands.get_log_content() == "A"
        log_file.write_text("AB")
        assert commands.get_log_content() == "AB"

    def test_default_paths(self, commands, log_file):
        """Test candidates are listed as strings, primary first, existing or not."""
        paths = commands.get_default_paths()
        assert paths[0] == str(log_file)
        assert paths[1].endswith("latest.log")
        assert ".lunarclient" in paths[1]

    def test_validate_path(self, commands, log_file):
        """Test validate_path is an existence check."""
        assert commands.validate_path(str(log_file)) is False
        log_file.write_text("")
        assert commands.validate_path(str(log_file)) is True


class TestWatchPath:
    """Tests for watch_path() announcements."""

    def test_announces_location_and_content(self, commands, sink, tmp_path):
        """Test a readable path emits location then content."""
        target = tmp_path / "other.log"
        target.write_text("other content")

        commands.watch_path(str(target))

        assert sink.events == [("log-location", str(target)), ("log-update", "other content")]

    def test_unreadable_path_emits_location_only(self, commands, sink, tmp_path):
        """Test a path that exists but cannot be read only emits the location."""
        target = tmp_path / "dir.log"
        target.mkdir()

        commands.watch_path(str(target))

        assert sink.events == [("log-location", str(target))]

    def test_missing_path(self, commands, sink, tmp_path):
        """Test a missing path raises PathNotFound and emits nothing."""
        with pytest.raises(PathNotFound, match="File not found"):
            commands.watch_path(str(tmp_path / "missing.log"))
        assert sink.events == []
