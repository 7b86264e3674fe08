from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """
    One line of a reconstructed deck.

    Attributes:
        name: Card name exactly as it appeared in the replay log
        count: Copies in the deck (1-3 after legality clamping)
    """

    name: str
    count: int


@dataclass
class GameDeck:
    """
    Cards observed for each player during one game.

    Counts only grow as events are recorded. Card order within a player
    is first-seen order.
    """

    game_index: int
    players: dict[str, dict[str, int]] = field(default_factory=dict)

    def add_card(self, player: str, card_name: str, quantity: int = 1) -> None:
        """Count more copies of a card for a player."""
        cards = self.players.setdefault(player, {})
        cards[card_name] = cards.get(card_name, 0) + quantity

    def get_quantity(self, player: str, card_name: str) -> int:
        """Copies of a card observed for a player in this game."""
        return self.players.get(player, {}).get(card_name, 0)

    def sorted_entries(self, player: str) -> list[DeckEntry]:
        """A player's cards, ascending by count, ties in first-seen order."""
        cards = self.players.get(player, {})
        entries = [DeckEntry(name=name, count=count) for name, count in cards.items()]
        return sorted(entries, key=lambda entry: entry.count)


@dataclass
class FinalDeck:
    """
    The merged, legality-clamped deck of every player in a match.

    Entries per player are already in export order.
    """

    players: dict[str, list[DeckEntry]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """True if no player has any card."""
        return not any(self.players.values())

    def get_quantity(self, player: str, card_name: str) -> int:
        """Final copies of a card in a player's deck."""
        for entry in self.players.get(player, []):
            if entry.name == card_name:
                return entry.count
        return 0
