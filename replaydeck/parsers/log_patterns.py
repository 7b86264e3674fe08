"""
Patterns for deck-revealing actions in DuelingBook replay logs.

Each pattern reads one log channel and captures the quoted card name:

    private: Drew "Pot of Greed"
    private: Added "Sangan" from Deck to hand
    public:  Milled "Sangan" from top of deck
    public:  Special Summoned "Sangan" from Deck
    public:  Banished "Sangan" from Deck
    public:  Sent Set "Sangan" from Deck to GY

Keywords match case-sensitively. The captured name is used verbatim as a
deck key; "Pot of Greed" and "pot of greed" stay two different cards.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from replaydeck.models.events import ActionKind, LogChannel

# Card names never contain a double quote, so [^"]+ stops at the closing one
_NAME = r'"([^"]+)"'


@dataclass(frozen=True, slots=True)
class LogPattern:
    """
    A single recognizable action.

    Attributes:
        channel: Log channel the pattern applies to
        action: Action kind reported for each match
        regex: Compiled pattern with exactly one group (the card name)
    """

    channel: LogChannel
    action: ActionKind
    regex: re.Pattern[str]


DREW_PATTERN = LogPattern(
    LogChannel.PRIVATE,
    ActionKind.DREW,
    re.compile(rf"Drew {_NAME}"),
)

ADDED_FROM_DECK_PATTERN = LogPattern(
    LogChannel.PRIVATE,
    ActionKind.ADDED_TO_HAND_FROM_DECK,
    re.compile(rf"Added {_NAME} from Deck to hand"),
)

MILLED_PATTERN = LogPattern(
    LogChannel.PUBLIC,
    ActionKind.MILLED_FROM_DECK,
    re.compile(rf"Milled {_NAME} from top of deck"),
)

SPECIAL_SUMMONED_FROM_DECK_PATTERN = LogPattern(
    LogChannel.PUBLIC,
    ActionKind.SPECIAL_SUMMONED_FROM_DECK,
    re.compile(rf"Special Summoned {_NAME} from Deck"),
)

BANISHED_FROM_DECK_PATTERN = LogPattern(
    LogChannel.PUBLIC,
    ActionKind.BANISHED_FROM_DECK,
    re.compile(rf"Banished {_NAME} from Deck"),
)

# Any banish, wherever the card came from
BANISHED_ANY_PATTERN = LogPattern(
    LogChannel.PUBLIC,
    ActionKind.BANISHED_FROM_DECK,
    re.compile(rf"Banished {_NAME}"),
)

SENT_TO_GY_PATTERN = LogPattern(
    LogChannel.PUBLIC,
    ActionKind.SENT_TO_GY_FROM_DECK,
    re.compile(rf"Sent(?: Set)?\s*{_NAME}(?: from Deck)?\s+to GY"),
)


def build_patterns(
    enabled: Iterable[ActionKind] | None = None,
    strict_banish: bool = True,
) -> list[LogPattern]:
    """
    Build the pattern list for a set of enabled actions.

    Args:
        enabled: Action kinds to recognize. None enables all of them.
        strict_banish: If True, only banishes "from Deck" count.
            If False, any banish counts.

    Returns:
        Enabled patterns in a fixed declaration order
    """
    enabled_set = set(ActionKind) if enabled is None else set(enabled)
    banish = BANISHED_FROM_DECK_PATTERN if strict_banish else BANISHED_ANY_PATTERN

    ordered = [
        DREW_PATTERN,
        ADDED_FROM_DECK_PATTERN,
        MILLED_PATTERN,
        SPECIAL_SUMMONED_FROM_DECK_PATTERN,
        banish,
        SENT_TO_GY_PATTERN,
    ]
    return [pattern for pattern in ordered if pattern.action in enabled_set]


def find_card_names(pattern: LogPattern, text: str) -> list[str]:
    """Every card name the pattern matches in text, in order of appearance."""
    if not text:
        return []
    return [match.group(1) for match in pattern.regex.finditer(text)]
