from typing import Any

from replaydeck.models.events import DRAWS_ONLY, ActionKind, CardEvent
from replaydeck.models.replay import LogEntry
from replaydeck.parsers.event_extractor import EventExtractor
from replaydeck.parsers.log_patterns import build_patterns


def make_extractor(**kwargs: Any) -> EventExtractor:
    return EventExtractor(build_patterns(**kwargs), system_username="Duelingbook")


class TestEventExtractor:
    def test_extracts_private_draw(self) -> None:
        entry = LogEntry(username="Alice", private_log='Drew "Sangan"')

        events = make_extractor().extract(entry, game_index=0)

        assert events == [
            CardEvent(game_index=0, player="Alice", card_name="Sangan", action=ActionKind.DREW)
        ]

    def test_draw_in_public_log_ignored(self) -> None:
        """Draw patterns only read the private channel."""
        entry = LogEntry(username="Alice", public_log='Drew "Sangan"')

        assert make_extractor().extract(entry, game_index=0) == []

    def test_banish_in_private_log_ignored(self) -> None:
        entry = LogEntry(username="Alice", private_log='Banished "Sangan" from Deck')

        assert make_extractor().extract(entry, game_index=0) == []

    def test_system_username_skipped(self) -> None:
        entry = LogEntry(
            username="Duelingbook",
            public_log='Banished "Sangan" from Deck',
            private_log='Drew "Sangan"',
        )

        assert make_extractor().extract(entry, game_index=0) == []

    def test_missing_username_skipped(self) -> None:
        entry = LogEntry(private_log='Drew "Sangan"')

        assert make_extractor().extract(entry, game_index=0) == []

    def test_multiple_actions_in_one_entry(self) -> None:
        entry = LogEntry(
            username="Bob",
            public_log='Banished "Card A" from Deck, Sent "Card A" from Deck to GY',
        )

        events = make_extractor().extract(entry, game_index=1)

        assert [(e.card_name, e.action) for e in events] == [
            ("Card A", ActionKind.BANISHED_FROM_DECK),
            ("Card A", ActionKind.SENT_TO_GY_FROM_DECK),
        ]
        assert all(e.game_index == 1 for e in events)

    def test_disabled_actions_not_extracted(self) -> None:
        entry = LogEntry(
            username="Bob",
            public_log='Banished "Card A" from Deck',
            private_log='Drew "Card B"',
        )

        events = make_extractor(enabled=DRAWS_ONLY).extract(entry, game_index=0)

        assert [e.card_name for e in events] == ["Card B"]
