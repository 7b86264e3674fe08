from replaydeck.services.deck_accumulator import DeckAccumulator
from replaydeck.services.deck_exporter import DeckExporter, sanitize_filename
from replaydeck.services.deck_formatter import format_readable, format_ydk
from replaydeck.services.deck_merger import merge_counts, merge_game_decks
from replaydeck.services.game_segmenter import GameEntry, GameSegmenter
from replaydeck.services.pipeline import Reconstruction, reconstruct_decks, run_reconstruction
from replaydeck.services.serial_resolver import CardSerialResolver

__all__ = [
    "CardSerialResolver",
    "DeckAccumulator",
    "DeckExporter",
    "GameEntry",
    "GameSegmenter",
    "Reconstruction",
    "format_readable",
    "format_ydk",
    "merge_counts",
    "merge_game_decks",
    "reconstruct_decks",
    "run_reconstruction",
    "sanitize_filename",
]
