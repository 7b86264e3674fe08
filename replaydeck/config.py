from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from replaydeck.models.events import ALL_ACTIONS, ActionKind
from replaydeck.models.strategy import GameBoundary, MergePolicy


class Settings(BaseSettings):
    """Reconstruction settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="REPLAYDECK_")

    # Username DuelingBook uses for its own narration
    system_username: str = "Duelingbook"

    enabled_actions: frozenset[ActionKind] = ALL_ACTIONS

    # True: only "Banished ... from Deck" counts. False: any banish counts.
    strict_banish: bool = True

    game_boundary: GameBoundary = GameBoundary.WRAPPER
    merge_policy: MergePolicy = MergePolicy.MAX

    output_dir: Path = Path(".")
    readable_extension: str = "txt"
    structured_extension: str = "ydk"
    emit_per_game: bool = False

    # JSON file overriding the built-in limited / semi-limited lists
    legality_path: Path | None = None

    ydk_creator: str = "replaydeck"


# =============================================================================
# DECK RECONSTRUCTION CONSTANTS
# =============================================================================

# Serial written for cards never seen in replay metadata
UNKNOWN_SERIAL = "UNKNOWN"

# Private-log phrase emitted once per game during setup
GO_FIRST_PHRASE = "Chose to go first"
