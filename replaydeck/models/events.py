"""
Card event taxonomy.

A CardEvent is one observation that a player's deck held a card:
the card left the deck by being drawn, searched, milled, summoned,
banished or sent to the GY. Events are derived from log text and
never stored past a single reconstruction run.
"""

from dataclasses import dataclass
from enum import Enum


class ActionKind(str, Enum):
    """Deck-revealing actions recognized in replay logs."""

    DREW = "drew"
    ADDED_TO_HAND_FROM_DECK = "added_to_hand_from_deck"
    MILLED_FROM_DECK = "milled_from_deck"
    SPECIAL_SUMMONED_FROM_DECK = "special_summoned_from_deck"
    BANISHED_FROM_DECK = "banished_from_deck"
    SENT_TO_GY_FROM_DECK = "sent_to_gy_from_deck"


class LogChannel(str, Enum):
    """Which narration a pattern reads."""

    PUBLIC = "public"
    PRIVATE = "private"


# Action subsets used by the narrower reconstruction variants
DRAWS_ONLY: frozenset[ActionKind] = frozenset({ActionKind.DREW})
DRAWS_BANISH_GY: frozenset[ActionKind] = frozenset(
    {
        ActionKind.DREW,
        ActionKind.BANISHED_FROM_DECK,
        ActionKind.SENT_TO_GY_FROM_DECK,
    }
)
ALL_ACTIONS: frozenset[ActionKind] = frozenset(ActionKind)


@dataclass(frozen=True, slots=True)
class CardEvent:
    """
    A single deck-revealing action.

    Attributes:
        game_index: Zero-based game within the match
        player: Username of the acting player
        card_name: Card name exactly as quoted in the log
        action: What happened to the card
    """

    game_index: int
    player: str
    card_name: str
    action: ActionKind
