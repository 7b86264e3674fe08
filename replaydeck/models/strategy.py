"""Configurable reconstruction strategies."""

from enum import Enum


class GameBoundary(str, Enum):
    """
    How the start of a new game is detected in the record stream.

    WRAPPER: a record whose log is a list of entries opens a game.
    GO_FIRST: a private log saying "Chose to go first" opens a game.
    """

    WRAPPER = "wrapper"
    GO_FIRST = "go_first"


class MergePolicy(str, Enum):
    """
    How per-game counts combine into one deck.

    MAX: most copies seen in any single game (canonical).
    SUM: per-game counts clamped to their limit, then summed and clamped
        again. Kept to reproduce older outputs; it overcounts when the
        same copy is seen in several games.
    """

    MAX = "max"
    SUM = "sum"
