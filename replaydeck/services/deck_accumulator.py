"""
Per-game deck accumulation.

Counts, for every game and player, how many copies of each card left
the deck. There is no cap here; copy limits apply only after games are
merged.
"""

from replaydeck.models.deck import GameDeck
from replaydeck.models.events import CardEvent


class DeckAccumulator:
    """Collects card observations into one GameDeck per game."""

    def __init__(self) -> None:
        self._games: dict[int, GameDeck] = {}

    def record(self, game_index: int, player: str, card_name: str) -> None:
        """Count one more copy of a card for a player in a game."""
        game = self._games.get(game_index)
        if game is None:
            game = GameDeck(game_index=game_index)
            self._games[game_index] = game
        game.add_card(player, card_name)

    def record_event(self, event: CardEvent) -> None:
        """Count the card of an extracted event."""
        self.record(event.game_index, event.player, event.card_name)

    def games(self) -> list[GameDeck]:
        """Accumulated games, ordered by game index."""
        return [self._games[index] for index in sorted(self._games)]
