from replaydeck.models.deck import DeckEntry, FinalDeck, GameDeck
from replaydeck.models.events import (
    ALL_ACTIONS,
    DRAWS_BANISH_GY,
    DRAWS_ONLY,
    ActionKind,
    CardEvent,
    LogChannel,
)
from replaydeck.models.failure import (
    ExportError,
    ExportReport,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
)
from replaydeck.models.legality import LegalityTable, load_legality_table
from replaydeck.models.replay import CardMetadata, LogEntry, PlayRecord
from replaydeck.models.strategy import GameBoundary, MergePolicy

__all__ = [
    "ALL_ACTIONS",
    "DRAWS_BANISH_GY",
    "DRAWS_ONLY",
    "ActionKind",
    "CardEvent",
    "CardMetadata",
    "DeckEntry",
    "ExportError",
    "ExportReport",
    "FailureDetail",
    "FailureKind",
    "FinalDeck",
    "GameBoundary",
    "GameDeck",
    "KnownError",
    "LegalityTable",
    "LogChannel",
    "LogEntry",
    "MergePolicy",
    "OutcomeType",
    "PlayRecord",
    "load_legality_table",
]
