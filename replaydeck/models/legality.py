"""
Legality Table: Copy Limits per Card Name.

INVARIANT: A reconstructed deck never lists more copies of a card than
its tier allows. The tier is looked up by exact card name.

Tiers:
1. Limited: at most 1 copy
2. Semi-limited: at most 2 copies
3. Everything else: at most 3 copies

The built-in table is the Goat format list most DuelingBook replays are
played under. Any other list can be supplied as JSON:

    {"limited": ["Pot of Greed", ...], "semi_limited": ["Creature Swap", ...]}
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from replaydeck.models.failure import FailureKind, KnownError

LIMITED_COPY_LIMIT = 1
SEMI_LIMITED_COPY_LIMIT = 2
DEFAULT_COPY_LIMIT = 3

GOAT_LIMITED: frozenset[str] = frozenset(
    {
        "Black Luster Soldier - Envoy of the Beginning",
        "Breaker the Magical Warrior",
        "Call of the Haunted",
        "Ceasefire",
        "Chaos Sorcerer",
        "Confiscation",
        "Dark Hole",
        "Delinquent Duo",
        "Exiled Force",
        "Graceful Charity",
        "Heavy Storm",
        "Jinzo",
        "Limiter Removal",
        "Marshmallon",
        "Metamorphosis",
        "Mirror Force",
        "Monster Reborn",
        "Morphing Jar",
        "Mystical Space Typhoon",
        "Nobleman of Crossout",
        "Pot of Greed",
        "Premature Burial",
        "Reinforcement of the Army",
        "Ring of Destruction",
        "Sangan",
        "Scapegoat",
        "Sinister Serpent",
        "Snatch Steal",
        "Torrential Tribute",
        "Tribe-Infecting Virus",
        "Tsukuyomi",
        "Twin-Headed Behemoth",
        "Upstart Goblin",
    }
)

GOAT_SEMI_LIMITED: frozenset[str] = frozenset(
    {
        "Creature Swap",
        "Good Goblin Housekeeping",
        "Last Turn",
        "Magician of Faith",
        "Night Assailant",
    }
)


@dataclass(frozen=True, slots=True)
class LegalityTable:
    """
    Copy limits for a restriction list.

    Attributes:
        limited: Card names allowed at 1 copy
        semi_limited: Card names allowed at 2 copies
    """

    limited: frozenset[str] = field(default_factory=frozenset)
    semi_limited: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Reject tables that put a card in both tiers."""
        overlap = self.limited & self.semi_limited
        if overlap:
            raise KnownError(
                kind=FailureKind.INVALID_INPUT,
                message="Legality table lists cards as both limited and semi-limited.",
                detail=f"Overlapping cards: {', '.join(sorted(overlap))}",
                suggestion="Keep each card in exactly one tier.",
            )

    @classmethod
    def goat(cls) -> "LegalityTable":
        """The built-in Goat format table."""
        return cls(limited=GOAT_LIMITED, semi_limited=GOAT_SEMI_LIMITED)

    def limit_for(self, card_name: str) -> int:
        """Maximum copies of a card allowed in a deck."""
        if card_name in self.limited:
            return LIMITED_COPY_LIMIT
        if card_name in self.semi_limited:
            return SEMI_LIMITED_COPY_LIMIT
        return DEFAULT_COPY_LIMIT

    def clamp(self, card_name: str, count: int) -> int:
        """Reduce an observed count to what the card's tier allows."""
        return min(count, self.limit_for(card_name))


def load_legality_table(path: Path | None = None) -> LegalityTable:
    """
    Load a legality table from a JSON file.

    Args:
        path: JSON file with "limited" and "semi_limited" name lists.
            None returns the built-in Goat table.

    Returns:
        LegalityTable for the file's lists

    Raises:
        KnownError: If the file is missing, unreadable or malformed
    """
    if path is None:
        return LegalityTable.goat()

    if not path.exists():
        raise KnownError(
            kind=FailureKind.NOT_FOUND,
            message=f"Legality file not found at {path}.",
            suggestion="Pass a JSON file with 'limited' and 'semi_limited' lists.",
        )

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Legality file at {path} could not be read.",
            detail=str(e),
        ) from e

    if not isinstance(data, dict):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Legality file must contain a JSON object.",
            detail=f"Got {type(data).__name__}",
        )

    limited = data.get("limited", [])
    semi_limited = data.get("semi_limited", [])
    if not isinstance(limited, list) or not isinstance(semi_limited, list):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="'limited' and 'semi_limited' must be lists of card names.",
        )

    return LegalityTable(
        limited=frozenset(str(name) for name in limited),
        semi_limited=frozenset(str(name) for name in semi_limited),
    )
