"""
Game segmentation for multi-game matches.

A replay of a best-of-three is one flat list of plays. The segmenter
walks it in order and stamps each log entry with the game it belongs to.
There is no "game over" marker: a game ends when the next one starts.

Two boundary signals appear in real replays, and which one a replay
carries depends on how it was saved:

- WRAPPER: a play whose log is a list of entries starts a game
- GO_FIRST: a private log containing "Chose to go first" starts a game

Entries seen before the first boundary cannot be attributed to a game
and are dropped.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from replaydeck.config import GO_FIRST_PHRASE
from replaydeck.models.replay import LogEntry, PlayRecord
from replaydeck.models.strategy import GameBoundary

logger = logging.getLogger(__name__)

NO_GAME = -1


@dataclass(frozen=True, slots=True)
class GameEntry:
    """A log entry stamped with its game index."""

    game_index: int
    entry: LogEntry


class GameSegmenter:
    """
    Stateful scan assigning log entries to games.

    State is the current game index, starting at -1 (no game yet).
    """

    def __init__(self, boundary: GameBoundary = GameBoundary.WRAPPER) -> None:
        self.boundary = boundary
        self.current_game_index = NO_GAME
        self.dropped_entries = 0
        self.records_without_log = 0

    @property
    def games_started(self) -> int:
        """Number of games opened so far."""
        return self.current_game_index + 1

    def _start_game(self) -> None:
        self.current_game_index += 1
        logger.debug("Game %d started", self.current_game_index)

    def feed(self, record: PlayRecord) -> list[GameEntry]:
        """
        Advance the scan by one play.

        Args:
            record: Next play in replay order

        Returns:
            The play's entries that belong to an open game
        """
        if record.log is None:
            self.records_without_log += 1
            return []

        if self.boundary == GameBoundary.WRAPPER and record.is_wrapper:
            self._start_game()

        entries = record.entries()

        stamped: list[GameEntry] = []
        for entry in entries:
            if self.boundary == GameBoundary.GO_FIRST and GO_FIRST_PHRASE in entry.private_log:
                self._start_game()

            if self.current_game_index == NO_GAME:
                self.dropped_entries += 1
                continue

            stamped.append(GameEntry(game_index=self.current_game_index, entry=entry))

        return stamped

    def segment(self, records: Iterable[PlayRecord]) -> Iterator[GameEntry]:
        """Stamp every entry of a replay, in order."""
        for record in records:
            yield from self.feed(record)
