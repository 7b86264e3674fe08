"""
Deck reconstruction pipeline.

Replay plays flow strictly forward through:

    segmenter -> event extractor -> accumulator -> merger -> exporter

The serial resolver sees every play as it is scanned and looks ahead
over the whole replay when a name has not been revealed yet.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from replaydeck.config import Settings
from replaydeck.models.deck import FinalDeck, GameDeck
from replaydeck.models.failure import ExportReport, FailureKind
from replaydeck.models.legality import LegalityTable, load_legality_table
from replaydeck.models.replay import PlayRecord
from replaydeck.parsers.event_extractor import EventExtractor
from replaydeck.parsers.log_patterns import build_patterns
from replaydeck.services.deck_accumulator import DeckAccumulator
from replaydeck.services.deck_exporter import DeckExporter
from replaydeck.services.deck_merger import merge_game_decks
from replaydeck.services.game_segmenter import GameSegmenter
from replaydeck.services.serial_resolver import CardSerialResolver

logger = logging.getLogger(__name__)


@dataclass
class Reconstruction:
    """Everything derived from one replay."""

    games: list[GameDeck]
    final_deck: FinalDeck
    resolver: CardSerialResolver
    event_count: int
    dropped_entries: int

    @property
    def is_empty(self) -> bool:
        """True if no card event was attributed to any game."""
        return self.event_count == 0


def reconstruct_decks(
    records: Sequence[PlayRecord],
    config: Settings | None = None,
    legality: LegalityTable | None = None,
) -> Reconstruction:
    """
    Reconstruct every player's deck from a replay.

    Args:
        records: Plays in replay order
        config: Reconstruction settings. Defaults to the environment settings.
        legality: Copy limits. Defaults to the table named by the settings.

    Returns:
        Reconstruction with per-game decks, the merged deck and the resolver
    """
    config = config or Settings()
    if legality is None:
        legality = load_legality_table(config.legality_path)

    resolver = CardSerialResolver(records)
    segmenter = GameSegmenter(config.game_boundary)
    extractor = EventExtractor(
        build_patterns(config.enabled_actions, strict_banish=config.strict_banish),
        system_username=config.system_username,
    )
    accumulator = DeckAccumulator()
    event_count = 0

    for record in records:
        resolver.observe(record)
        for game_entry in segmenter.feed(record):
            for event in extractor.extract(game_entry.entry, game_entry.game_index):
                resolver.resolve(event.card_name)
                accumulator.record_event(event)
                event_count += 1

    if segmenter.games_started == 0 and records:
        logger.warning(
            "no_game_boundary",
            extra={
                "kind": FailureKind.NO_GAME_BOUNDARY.value,
                "boundary": config.game_boundary.value,
                "dropped_entries": segmenter.dropped_entries,
            },
        )
    elif segmenter.dropped_entries:
        logger.info("Dropped %d log entries before the first game", segmenter.dropped_entries)

    games = accumulator.games()
    final_deck = merge_game_decks(games, legality, config.merge_policy)

    logger.info(
        "Reconstructed %d game(s), %d event(s), %d player(s)",
        segmenter.games_started,
        event_count,
        len(final_deck.players),
    )

    return Reconstruction(
        games=games,
        final_deck=final_deck,
        resolver=resolver,
        event_count=event_count,
        dropped_entries=segmenter.dropped_entries,
    )


def run_reconstruction(
    records: Sequence[PlayRecord],
    config: Settings | None = None,
    legality: LegalityTable | None = None,
) -> ExportReport:
    """
    Reconstruct decks from a replay and write them to disk.

    Args:
        records: Plays in replay order
        config: Reconstruction and output settings
        legality: Copy limits override

    Returns:
        ExportReport for the written files
    """
    config = config or Settings()
    reconstruction = reconstruct_decks(records, config, legality)

    exporter = DeckExporter(
        output_dir=config.output_dir,
        system_username=config.system_username,
        readable_extension=config.readable_extension,
        structured_extension=config.structured_extension,
        ydk_creator=config.ydk_creator,
        emit_per_game=config.emit_per_game,
    )
    return exporter.export(
        reconstruction.final_deck,
        reconstruction.resolver,
        games=reconstruction.games,
    )
