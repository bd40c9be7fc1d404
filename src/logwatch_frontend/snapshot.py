"""Reading the log file and fingerprinting its content."""

import hashlib
from pathlib import Path

from logwatch_frontend.errors import ReadError
from logwatch_frontend.models import FileSnapshot

# Content larger than this is sampled instead of hashed in full
SAMPLE_THRESHOLD = 1024
SAMPLE_WINDOW = 512


def fingerprint(content: str) -> int:
    """Compute a cheap 64-bit fingerprint of log content.

    The UTF-8 length is always hashed. Content above SAMPLE_THRESHOLD bytes
    only contributes its first and last SAMPLE_WINDOW bytes, so an edit
    confined to the middle of a large file that keeps the length unchanged is
    not detected.

    Args:
        content: Decoded file text

    Returns:
        Unsigned 64-bit integer
    """
    data = content.encode("utf-8")
    hasher = hashlib.blake2b(digest_size=8)
    hasher.update(len(data).to_bytes(8, "little"))
    if len(data) > SAMPLE_THRESHOLD:
        hasher.update(data[:SAMPLE_WINDOW])
        hasher.update(data[-SAMPLE_WINDOW:])
    else:
        hasher.update(data)
    return int.from_bytes(hasher.digest(), "little")


def read_content(path: str | Path) -> str:
    """Read the full log file as UTF-8 text.

    Raises:
        ReadError: If the file cannot be opened or decoded
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Failed to read log: {e}") from e


def read_snapshot(path: str | Path) -> FileSnapshot:
    """Read the log file and fingerprint it.

    Raises:
        ReadError: If the file cannot be opened or decoded
    """
    content = read_content(path)
    return FileSnapshot(content=content, fingerprint=fingerprint(content))
