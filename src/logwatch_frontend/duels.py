"""Parkour Duels results parsed from full log content.

Works on the text carried by log-update events. Each game starts at a short
``[CHAT]`` header line naming Parkour Duels; checkpoint and completion chat
lines that follow are recorded per player. The local player's own lines say
"You", so they are filed under the name from the client's ``Setting user:``
line.
"""

import re
from dataclasses import dataclass, field

# Sort position of a completion among a player's checkpoints
FINISH_CHECKPOINT = 9999

CHAT_MARKER = "[CHAT]"
GAME_TITLE = "Parkour Duels"
# Headers are short; longer chat lines mentioning the game are announcements
MAX_HEADER_LENGTH = 40
HEADER_EXCLUDES = ("Winstreak", "TITLE", "CHECKPOINT", "COMPLETED")

USER_PATTERN = re.compile(r"Setting user:\s*(\S+)")
OPPONENTS_PREFIX = re.compile(r"^Opponents:\s*")
COLOR_CODE = re.compile(r"§.")
RANK_TAG = re.compile(r"\[.*?\]\s*")

OWN_CHECKPOINT = re.compile(r"\[CHAT\].*?CHECKPOINT!\s+You\s+reached checkpoint\s+(\d+)\s+in\s+([\d:.]+)!")
CHECKPOINT = re.compile(r"\[CHAT\].*?CHECKPOINT!\s+(.+?)\s+reached checkpoint\s+(\d+)\s+in\s+([\d:.]+)!")
OWN_FINISH = re.compile(r"\[CHAT\].*?COMPLETED!\s+You\s+completed the parkour in\s+([\d:.]+)!")
FINISH = re.compile(r"\[CHAT\].*?COMPLETED!\s+(.+?)\s+completed the parkour in\s+([\d:.]+)!")


def time_to_seconds(text: str) -> float:
    """Convert a chat timestamp such as ``01:23.456`` or ``(+0:05.1)`` to seconds."""
    minutes, sep, seconds = re.sub(r"[()+ ]", "", text).partition(":")
    if not sep:
        return float(minutes)
    return float(minutes) * 60 + float(seconds)


def format_seconds(seconds: float | None) -> str:
    """Format seconds as ``MM:SS.mmm`` (``--`` when unknown)."""
    if seconds is None:
        return "--"
    minutes = int(seconds // 60)
    return f"{minutes:02d}:{seconds % 60:06.3f}"


@dataclass(frozen=True)
class Split:
    """One checkpoint or completion time of a player."""

    checkpoint: int
    """Checkpoint number, FINISH_CHECKPOINT for the completion."""

    time: str
    """Time as printed in chat."""

    @property
    def is_finish(self) -> bool:
        return self.checkpoint == FINISH_CHECKPOINT

    @property
    def seconds(self) -> float:
        return time_to_seconds(self.time)


@dataclass
class DuelGame:
    """Splits of every player seen in one game."""

    players: dict[str, list[Split]] = field(default_factory=dict)
    """Player name -> splits, sorted by checkpoint once parsing is done."""

    opponents: str = ""
    """Text of the game's Opponents: lines, joined with spaces."""

    def add_checkpoint(self, player: str, checkpoint: int, time: str) -> None:
        splits = self.players.setdefault(player, [])
        if not any(s.checkpoint == checkpoint for s in splits):
            splits.append(Split(checkpoint, time))

    def add_finish(self, player: str, time: str) -> None:
        splits = self.players.setdefault(player, [])
        if not any(s.is_finish for s in splits):
            splits.append(Split(FINISH_CHECKPOINT, time))

    def finish(self, player: str) -> Split | None:
        """The player's completion split, if they finished."""
        return next((s for s in self.players.get(player, []) if s.is_finish), None)

    def ranking(self) -> list[str]:
        """Players ordered by finish time, then non-finishers by progress.

        Ties keep the order in which players first appeared.
        """

        def key(player: str) -> tuple[int, float]:
            done = self.finish(player)
            if done is not None:
                return (0, done.seconds)
            return (1, -len(self.players[player]))

        return sorted(self.players, key=key)

    @property
    def split_count(self) -> int:
        return sum(len(splits) for splits in self.players.values())


@dataclass
class DuelLog:
    """All games found in one log, oldest first."""

    games: list[DuelGame] = field(default_factory=list)
    username: str | None = None
    """Local player, from the latest ``Setting user:`` line."""

    @property
    def latest(self) -> DuelGame | None:
        return self.games[-1] if self.games else None


def _chat_text(line: str) -> str:
    """Text after the [CHAT] marker, trimmed, with color codes removed."""
    text = line[line.index(CHAT_MARKER) + len(CHAT_MARKER):].strip()
    return COLOR_CODE.sub("", text)


def _player_name(raw: str) -> str:
    return RANK_TAG.sub("", COLOR_CODE.sub("", raw)).strip()


def _is_game_header(line: str) -> bool:
    if CHAT_MARKER not in line or GAME_TITLE not in line:
        return False
    if any(word in line for word in HEADER_EXCLUDES):
        return False
    text = _chat_text(line)
    return GAME_TITLE in text and len(text) < MAX_HEADER_LENGTH


def parse_duels(content: str) -> DuelLog:
    """Parse every Parkour Duels game in the log text.

    Games without any recorded split are dropped. A repeated checkpoint or a
    second completion for the same player keeps the first time seen.

    Args:
        content: Full log text

    Returns:
        DuelLog with games in log order and each player's splits sorted
    """
    result = DuelLog()
    current: DuelGame | None = None

    for line in content.split("\n"):
        match = USER_PATTERN.search(line)
        if match:
            result.username = match.group(1)

        if _is_game_header(line):
            if current is not None and current.players:
                result.games.append(current)
            current = DuelGame()

        if current is None:
            continue

        if CHAT_MARKER in line and "Opponents:" in line:
            text = OPPONENTS_PREFIX.sub("", _chat_text(line))
            current.opponents = f"{current.opponents} {text}" if current.opponents else text

        match = OWN_CHECKPOINT.search(line)
        if match and result.username:
            current.add_checkpoint(result.username, int(match.group(1)), match.group(2))

        match = CHECKPOINT.search(line)
        if match:
            name = _player_name(match.group(1))
            if name != "You":
                current.add_checkpoint(name, int(match.group(2)), match.group(3))
            continue

        match = OWN_FINISH.search(line)
        if match and result.username:
            current.add_finish(result.username, match.group(1))

        match = FINISH.search(line)
        if match:
            name = _player_name(match.group(1))
            if name != "You":
                current.add_finish(name, match.group(2))

    if current is not None and current.players:
        result.games.append(current)

    for game in result.games:
        for splits in game.players.values():
            splits.sort(key=lambda s: s.checkpoint)

    return result
