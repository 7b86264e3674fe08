"""End-to-end tests for deck reconstruction."""

from pathlib import Path

from replaydeck.config import Settings
from replaydeck.models.deck import DeckEntry
from replaydeck.models.events import DRAWS_ONLY
from replaydeck.models.failure import OutcomeType
from replaydeck.models.legality import LegalityTable
from replaydeck.models.strategy import GameBoundary, MergePolicy
from replaydeck.parsers.replay_file import load_replay_file, parse_plays
from replaydeck.services.pipeline import reconstruct_decks, run_reconstruction


class TestReconstructDecks:
    def test_alice_two_games(self, alice_two_games, settings: Settings) -> None:
        """Pot of Greed and Sangan are both limited, so each ends at one copy."""
        result = reconstruct_decks(alice_two_games, settings)

        assert result.final_deck.players["Alice"] == [
            DeckEntry("Pot of Greed", 1),
            DeckEntry("Sangan", 1),
        ]
        assert [g.get_quantity("Alice", "Pot of Greed") for g in result.games] == [2, 1]
        assert result.event_count == 4

    def test_merge_is_max_not_sum(self, alice_two_games, settings: Settings) -> None:
        result = reconstruct_decks(alice_two_games, settings, legality=LegalityTable())

        assert result.final_deck.get_quantity("Alice", "Pot of Greed") == 2

    def test_sum_policy(self, alice_two_games, tmp_path: Path) -> None:
        config = Settings(output_dir=tmp_path, merge_policy=MergePolicy.SUM)

        result = reconstruct_decks(alice_two_games, config, legality=LegalityTable())

        assert result.final_deck.get_quantity("Alice", "Pot of Greed") == 3

    def test_banish_and_send_count_separately(self, play, game_start, settings: Settings) -> None:
        records = [
            game_start({"username": "Duelingbook"}),
            play("Bob", public_log='Banished "Card A" from Deck'),
            play("Bob", public_log='Sent "Card A" from Deck to GY'),
        ]

        result = reconstruct_decks(records, settings, legality=LegalityTable())

        assert result.final_deck.get_quantity("Bob", "Card A") == 2

    def test_system_username_excluded(self, play, game_start, settings: Settings) -> None:
        records = [
            game_start({"username": "Duelingbook", "private_log": 'Drew "Sangan"'}),
            play("Duelingbook", public_log='Banished "Sangan" from Deck'),
            play("Alice", private_log='Drew "Jinzo"'),
        ]

        result = reconstruct_decks(records, settings)

        assert list(result.final_deck.players) == ["Alice"]

    def test_events_before_first_game_dropped(self, play, game_start, settings: Settings) -> None:
        records = [
            play("Alice", private_log='Drew "Sangan"'),
            game_start({"username": "Duelingbook"}),
            play("Alice", private_log='Drew "Jinzo"'),
        ]

        result = reconstruct_decks(records, settings)

        assert result.final_deck.players["Alice"] == [DeckEntry("Jinzo", 1)]
        assert result.dropped_entries == 1

    def test_junk_wrapper_entry_keeps_games_apart(self, settings: Settings) -> None:
        records = parse_plays(
            [
                {"log": [{"username": "Duelingbook"}]},
                {"log": {"username": "Alice", "private_log": 'Drew "Kuriboh"'}},
                {"log": [{"username": "Duelingbook"}, "junk"]},
                {"log": {"username": "Alice", "private_log": 'Drew "Kuriboh"'}},
            ]
        )

        result = reconstruct_decks(records, settings)

        assert len(result.games) == 2
        assert result.final_deck.players["Alice"] == [DeckEntry("Kuriboh", 1)]

    def test_no_boundary_yields_empty_result(self, play, settings: Settings) -> None:
        records = [play("Alice", private_log='Drew "Sangan"')]

        result = reconstruct_decks(records, settings)

        assert result.is_empty
        assert result.final_deck.is_empty()

    def test_go_first_boundary(self, play, tmp_path: Path) -> None:
        config = Settings(output_dir=tmp_path, game_boundary=GameBoundary.GO_FIRST)
        records = [
            play("Alice", private_log="Chose to go first"),
            play("Alice", private_log='Drew "Kuriboh" Drew "Kuriboh"'),
            play("Bob", private_log="Chose to go first"),
            play("Alice", private_log='Drew "Kuriboh"'),
        ]

        result = reconstruct_decks(records, config)

        assert len(result.games) == 2
        assert result.final_deck.get_quantity("Alice", "Kuriboh") == 2

    def test_enabled_actions_respected(self, play, game_start, tmp_path: Path) -> None:
        config = Settings(output_dir=tmp_path, enabled_actions=DRAWS_ONLY)
        records = [
            game_start({"username": "Duelingbook"}),
            play("Bob", public_log='Banished "Card A" from Deck', private_log='Drew "Card B"'),
        ]

        result = reconstruct_decks(records, config)

        assert [e.name for e in result.final_deck.players["Bob"]] == ["Card B"]

    def test_loose_banish(self, play, game_start, tmp_path: Path) -> None:
        records = [
            game_start({"username": "Duelingbook"}),
            play("Bob", public_log='Banished "Card A" from GY'),
        ]

        strict = reconstruct_decks(records, Settings(output_dir=tmp_path))
        loose = reconstruct_decks(records, Settings(output_dir=tmp_path, strict_banish=False))

        assert strict.final_deck.is_empty()
        assert loose.final_deck.get_quantity("Bob", "Card A") == 1

    def test_card_names_pass_through_verbatim(self, play, game_start, settings: Settings) -> None:
        records = [
            game_start({"username": "Duelingbook"}),
            play("Alice", private_log='Drew "Kuriboh" Drew "kuriboh"'),
        ]

        result = reconstruct_decks(records, settings)

        assert [e.name for e in result.final_deck.players["Alice"]] == ["Kuriboh", "kuriboh"]

    def test_serials_resolved_with_look_ahead(self, play, game_start, settings: Settings) -> None:
        records = [
            game_start({"username": "Duelingbook"}),
            play("Alice", private_log='Drew "Sangan"'),
            play(card={"name": "Sangan", "serial_number": 26202165}),
        ]

        result = reconstruct_decks(records, settings)

        assert result.resolver.resolve("Sangan") == "26202165"


class TestRunReconstruction:
    def test_alice_readable_file(self, alice_two_games, settings: Settings) -> None:
        report = run_reconstruction(alice_two_games, settings)

        path = settings.output_dir / "Alice-final-deck.txt"
        assert path in report.written
        assert path.read_text(encoding="utf-8") == "Pot of Greed x1\nSangan x1"

    def test_unknown_serials_exported(self, alice_two_games, settings: Settings) -> None:
        report = run_reconstruction(alice_two_games, settings)

        ydk = (settings.output_dir / "Alice-final-deck.ydk").read_text(encoding="utf-8")
        assert ydk.splitlines()[2:4] == ["UNKNOWN", "UNKNOWN"]
        assert report.unresolved_cards == ["Pot of Greed", "Sangan"]

    def test_output_is_deterministic(self, alice_two_games, tmp_path: Path) -> None:
        first = Settings(output_dir=tmp_path / "first", emit_per_game=True)
        second = Settings(output_dir=tmp_path / "second", emit_per_game=True)

        run_reconstruction(alice_two_games, first)
        run_reconstruction(alice_two_games, second)

        first_files = {p.name: p.read_bytes() for p in first.output_dir.iterdir()}
        second_files = {p.name: p.read_bytes() for p in second.output_dir.iterdir()}
        assert first_files == second_files
        assert len(first_files) == 4

    def test_empty_input(self, settings: Settings) -> None:
        report = run_reconstruction([], settings)

        assert report.outcome == OutcomeType.NOTHING_TO_EXPORT
        assert list(settings.output_dir.iterdir()) == []

    def test_no_file_for_system_username(self, game_start, settings: Settings) -> None:
        records = [
            game_start({"username": "Duelingbook", "public_log": 'Banished "Sangan" from Deck'}),
        ]

        report = run_reconstruction(records, settings)

        assert report.nothing_to_export
        assert not list(settings.output_dir.glob("Duelingbook*"))

    def test_sample_replay(self, sample_replay_path: Path, settings: Settings) -> None:
        records = load_replay_file(sample_replay_path)

        report = run_reconstruction(records, settings)

        out = settings.output_dir
        assert report.ok
        assert (out / "Alice-final-deck.txt").read_text(encoding="utf-8") == (
            "Sangan x1\nPot of Greed x1"
        )
        assert (out / "Bob-final-deck.txt").read_text(encoding="utf-8") == (
            "Sinister Serpent x1\nNight Assailant x2"
        )
        assert (out / "Alice-final-deck.ydk").read_text(encoding="utf-8").splitlines() == [
            "#created by replaydeck",
            "#main",
            "26202165",
            "55144522",
            "#extra",
            "!side",
        ]
        assert (out / "Bob-final-deck.ydk").read_text(encoding="utf-8").splitlines()[2:5] == [
            "8131171",
            "UNKNOWN",
            "UNKNOWN",
        ]
        assert report.unresolved_cards == ["Night Assailant"]
