import itertools

from replaydeck.models.events import ActionKind, CardEvent
from replaydeck.services.deck_accumulator import DeckAccumulator


class TestDeckAccumulator:
    def test_record_counts_copies(self) -> None:
        accumulator = DeckAccumulator()
        accumulator.record(0, "Alice", "Pot of Greed")
        accumulator.record(0, "Alice", "Pot of Greed")
        accumulator.record(0, "Alice", "Sangan")

        (game,) = accumulator.games()
        assert game.players == {"Alice": {"Pot of Greed": 2, "Sangan": 1}}

    def test_no_cap_before_merge(self) -> None:
        accumulator = DeckAccumulator()
        for _ in range(5):
            accumulator.record(0, "Alice", "Pot of Greed")

        assert accumulator.games()[0].get_quantity("Alice", "Pot of Greed") == 5

    def test_counts_never_decrease(self) -> None:
        accumulator = DeckAccumulator()
        seen = []
        for name in ["Sangan", "Jinzo", "Sangan", "Sangan"]:
            accumulator.record(0, "Alice", name)
            seen.append(accumulator.games()[0].get_quantity("Alice", "Sangan"))

        assert seen == sorted(seen)

    def test_same_game_order_independent(self) -> None:
        events = [("Alice", "Sangan"), ("Alice", "Jinzo"), ("Bob", "Sangan"), ("Alice", "Sangan")]
        results = []
        for ordering in itertools.permutations(events):
            accumulator = DeckAccumulator()
            for player, name in ordering:
                accumulator.record(0, player, name)
            game = accumulator.games()[0]
            results.append({p: dict(sorted(c.items())) for p, c in game.players.items()})

        assert all(result == results[0] for result in results)

    def test_games_ordered_by_index(self) -> None:
        accumulator = DeckAccumulator()
        accumulator.record(2, "Alice", "Sangan")
        accumulator.record(0, "Alice", "Sangan")
        accumulator.record(1, "Bob", "Jinzo")

        assert [g.game_index for g in accumulator.games()] == [0, 1, 2]

    def test_record_event(self) -> None:
        accumulator = DeckAccumulator()
        accumulator.record_event(
            CardEvent(game_index=0, player="Bob", card_name="Jinzo", action=ActionKind.DREW)
        )

        assert accumulator.games()[0].get_quantity("Bob", "Jinzo") == 1

    def test_empty(self) -> None:
        assert DeckAccumulator().games() == []
