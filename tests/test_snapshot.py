"""Tests for fingerprinting and snapshot reads."""

import pytest

from logwatch_frontend.errors import ReadError
from logwatch_frontend.snapshot import SAMPLE_THRESHOLD, fingerprint, read_content, read_snapshot


class TestFingerprint:
    """Tests for fingerprint()."""

    def test_deterministic(self):
        """Test the same content always hashes the same."""
        content = "[12:00:01] [Render thread/INFO]: Setting user: Steve\n" * 40
        assert fingerprint(content) == fingerprint(content)
        assert fingerprint("") == fingerprint("")

    def test_fits_in_64_bits(self):
        """Test the value is an unsigned 64-bit integer."""
        for content in ("", "A", "x" * 5000):
            value = fingerprint(content)
            assert 0 <= value < 2**64

    def test_short_strings_differ_in_any_byte(self):
        """Test single-byte edits anywhere in short content change the fingerprint."""
        base = "".join(chr(ord("a") + i % 26) for i in range(SAMPLE_THRESHOLD))
        seen = {fingerprint(base)}
        for index in range(0, SAMPLE_THRESHOLD, 37):
            edited = base[:index] + "#" + base[index + 1 :]
            seen.add(fingerprint(edited))
        assert len(seen) == 1 + len(range(0, SAMPLE_THRESHOLD, 37))

    def test_growth_changes_fingerprint(self):
        """Test appending to a large log is detected through length and tail."""
        content = "line\n" * 1000
        assert fingerprint(content) != fingerprint(content + "line\n")

    def test_large_file_tail_edit_detected(self):
        """Test edits in the last 512 bytes of a large file are detected."""
        content = "a" * 4000
        edited = content[:-10] + "b" + content[-9:]
        assert fingerprint(content) != fingerprint(edited)

    def test_large_file_middle_edit_is_blind_spot(self):
        """Test the accepted approximation: same length, head and tail -> same fingerprint."""
        head = "H" * 512
        tail = "T" * 512
        first = head + "m" * 2000 + tail
        second = head + "n" * 2000 + tail
        assert first != second
        assert fingerprint(first) == fingerprint(second)

    def test_threshold_is_in_bytes(self):
        """Test multi-byte characters count toward the 1024-byte threshold."""
        # 600 two-byte chars = 1200 bytes, so only head and tail are sampled
        first = "é" * 600
        middle_edit = "é" * 256 + "ü" * 88 + "é" * 256
        assert len(first.encode("utf-8")) == len(middle_edit.encode("utf-8")) == 1200
        assert fingerprint(first) == fingerprint(middle_edit)


class TestReadSnapshot:
    """Tests for read_snapshot() and read_content()."""

    def test_read_snapshot(self, log_file):
        """Test content and fingerprint come from one read."""
        log_file.write_text("hello\n", encoding="utf-8")
        snapshot = read_snapshot(log_file)
        assert snapshot.content == "hello\n"
        assert snapshot.fingerprint == fingerprint("hello\n")

    def test_missing_file_raises_read_error(self, log_file):
        """Test OS errors are wrapped in ReadError."""
        with pytest.raises(ReadError, match="Failed to read log"):
            read_content(log_file)

    def test_invalid_utf8_raises_read_error(self, log_file):
        """Test undecodable content is a ReadError."""
        log_file.write_bytes(b"\xff\xfe\xfa broken")
        with pytest.raises(ReadError):
            read_snapshot(log_file)
