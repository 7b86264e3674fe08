"""
Deck export service.

Writes one set of files per player:

    <player>-final-deck.txt      readable "<name> x<count>" list
    <player>-final-deck.ydk      YDK deck list of serials
    <player>-game<N>-deck.txt    optional per-game diagnostics

INVARIANTS:
1. No file is ever written for the system username
2. Each file is written whole or not at all (temp file + rename)
3. A failed file never stops the remaining files from being written
"""

import logging
import os
import re
import tempfile
from pathlib import Path

from replaydeck.models.deck import FinalDeck, GameDeck
from replaydeck.models.failure import ExportError, ExportReport, FailureKind, OutcomeType
from replaydeck.services.deck_formatter import format_readable, format_ydk
from replaydeck.services.serial_resolver import CardSerialResolver

logger = logging.getLogger(__name__)

# Path separators, characters Windows rejects, and control characters
UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')

FALLBACK_STEM = "player"


def sanitize_filename(name: str) -> str:
    """
    Make a username safe to use as a file name stem.

    Unsafe characters become "_"; leading dots and surrounding
    whitespace are removed so the stem cannot be hidden or relative.
    """
    stem = UNSAFE_FILENAME_CHARS.sub("_", name).strip().lstrip(".")
    return stem or FALLBACK_STEM


def assign_file_stems(players: list[str]) -> dict[str, str]:
    """
    Give each player a unique, sanitized file stem.

    Players whose sanitized names collide (case-insensitively) get a
    numeric suffix in order of appearance: "a_b", "a_b-2", "a_b-3".
    """
    stems: dict[str, str] = {}
    taken: set[str] = set()

    for player in players:
        base = sanitize_filename(player)
        stem = base
        suffix = 2
        while stem.casefold() in taken:
            stem = f"{base}-{suffix}"
            suffix += 1
        taken.add(stem.casefold())
        stems[player] = stem

    return stems


def write_atomic(path: Path, content: str) -> None:
    """Write text to path so readers never see a partial file."""
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


class DeckExporter:
    """Writes reconstructed decks to an output directory."""

    def __init__(
        self,
        output_dir: Path,
        system_username: str,
        readable_extension: str = "txt",
        structured_extension: str = "ydk",
        ydk_creator: str = "replaydeck",
        emit_per_game: bool = False,
    ) -> None:
        self.output_dir = output_dir
        self.system_username = system_username
        self.readable_extension = readable_extension
        self.structured_extension = structured_extension
        self.ydk_creator = ydk_creator
        self.emit_per_game = emit_per_game

    def _write(self, player: str, path: Path, content: str, report: ExportReport) -> None:
        try:
            write_atomic(path, content)
        except OSError as e:
            error = ExportError(player=player, path=path, detail=str(e))
            logger.error("Failed to write %s for %s: %s", path, player, e)
            report.add_failure(error.to_failure())
            return

        logger.info("Saved %s", path)
        report.written.append(path)

    def export(
        self,
        final_deck: FinalDeck,
        resolver: CardSerialResolver,
        games: list[GameDeck] | None = None,
    ) -> ExportReport:
        """
        Write every player's deck files.

        Args:
            final_deck: Merged, clamped decks
            resolver: Resolves card names to serials for the YDK file
            games: Per-game decks, written only if emit_per_game is set

        Returns:
            ExportReport listing written files, failures and unresolved cards
        """
        report = ExportReport()

        players = [
            player
            for player, entries in final_deck.players.items()
            if entries and player != self.system_username
        ]
        if not players:
            logger.info(
                "Nothing to export: no card events found in replay",
                extra={"kind": FailureKind.EMPTY_RESULT.value},
            )
            report.outcome = OutcomeType.NOTHING_TO_EXPORT
            return report

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Every write below will fail and be reported per file
            logger.error("Could not create output directory %s: %s", self.output_dir, e)

        stems = assign_file_stems(players)

        for player in players:
            entries = final_deck.players[player]
            stem = stems[player]

            readable_path = self.output_dir / f"{stem}-final-deck.{self.readable_extension}"
            self._write(player, readable_path, format_readable(entries), report)

            ydk_path = self.output_dir / f"{stem}-final-deck.{self.structured_extension}"
            ydk_text = format_ydk(entries, resolver, creator=self.ydk_creator)
            self._write(player, ydk_path, ydk_text, report)

        if self.emit_per_game and games:
            for game in games:
                for player in players:
                    game_entries = game.sorted_entries(player)
                    if not game_entries:
                        continue
                    name = f"{stems[player]}-game{game.game_index + 1}-deck"
                    path = self.output_dir / f"{name}.{self.readable_extension}"
                    self._write(player, path, format_readable(game_entries), report)

        report.unresolved_cards = resolver.unresolved()
        if report.unresolved_cards:
            logger.warning(
                "unresolved_card_serials",
                extra={
                    "kind": FailureKind.UNRESOLVED_SERIAL.value,
                    "unresolved_count": len(report.unresolved_cards),
                    "unresolved_card_names": report.unresolved_cards[:10],
                },
            )

        return report
