"""
Cross-game merge and legality clamping.

Games of a match are independent shuffles of the same deck. The number
of copies seen in the single most revealing game is therefore a lower
bound on the copies in the deck, while a sum over games would count the
same physical card once per game.

INVARIANTS:
1. Merged count per (player, card) = max over games (MergePolicy.MAX)
2. Final count <= the card's legality limit
3. Entries ascend by final count; ties keep first-seen order
"""

import logging

from replaydeck.models.deck import DeckEntry, FinalDeck, GameDeck
from replaydeck.models.legality import LegalityTable
from replaydeck.models.strategy import MergePolicy

logger = logging.getLogger(__name__)


def merge_counts(
    games: list[GameDeck],
    legality: LegalityTable,
    policy: MergePolicy = MergePolicy.MAX,
) -> dict[str, dict[str, int]]:
    """
    Combine per-game counts into one pre-clamp count per player and card.

    Args:
        games: Game decks in game order
        legality: Table used by the SUM policy to cap each game's count
        policy: How counts from different games combine

    Returns:
        {player: {card_name: count}} in first-seen order
    """
    merged: dict[str, dict[str, int]] = {}

    for game in games:
        for player, cards in game.players.items():
            player_cards = merged.setdefault(player, {})
            for name, count in cards.items():
                current = player_cards.get(name, 0)
                if policy == MergePolicy.SUM:
                    player_cards[name] = current + legality.clamp(name, count)
                else:
                    player_cards[name] = max(current, count)

    return merged


def merge_game_decks(
    games: list[GameDeck],
    legality: LegalityTable,
    policy: MergePolicy = MergePolicy.MAX,
) -> FinalDeck:
    """
    Merge every game of a match into one legal deck per player.

    Args:
        games: Game decks in game order
        legality: Copy limits to clamp against
        policy: MAX (canonical) or SUM

    Returns:
        FinalDeck with entries sorted ascending by count
    """
    final = FinalDeck()
    clamped_cards = 0

    for player, cards in merge_counts(games, legality, policy).items():
        entries: list[DeckEntry] = []
        for name, count in cards.items():
            final_count = legality.clamp(name, count)
            if final_count < count:
                clamped_cards += 1
            entries.append(DeckEntry(name=name, count=final_count))

        # sorted() is stable, so equal counts keep first-seen order
        final.players[player] = sorted(entries, key=lambda entry: entry.count)

    if clamped_cards:
        logger.debug("Clamped %d card counts to their legality limit", clamped_cards)

    return final
