"""
Reconstruct deck lists from a saved DuelingBook replay.

Reads a view-replay JSON payload from disk and writes each player's
reconstructed deck as a readable list and a YDK file.
"""

import argparse
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import SettingsError

from replaydeck.config import Settings
from replaydeck.models.events import ActionKind
from replaydeck.models.failure import ExportReport, KnownError
from replaydeck.models.legality import load_legality_table
from replaydeck.models.strategy import GameBoundary, MergePolicy
from replaydeck.parsers.replay_file import load_replay_file
from replaydeck.services.pipeline import run_reconstruction

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options; anything omitted falls back to REPLAYDECK_* settings."""
    parser = argparse.ArgumentParser(
        description="Reconstruct each player's deck from a DuelingBook replay"
    )
    parser.add_argument(
        "replay",
        type=Path,
        help="Saved view-replay JSON file",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for deck files (default: current directory)",
    )
    parser.add_argument(
        "--boundary",
        choices=[boundary.value for boundary in GameBoundary],
        default=None,
        help="How new games are detected (default: wrapper)",
    )
    parser.add_argument(
        "--actions",
        nargs="+",
        choices=[action.value for action in ActionKind],
        default=None,
        help="Actions that reveal deck cards (default: all)",
    )
    parser.add_argument(
        "--loose-banish",
        action="store_true",
        help="Count every banish, not only banishes from the Deck",
    )
    parser.add_argument(
        "--merge-policy",
        choices=[policy.value for policy in MergePolicy],
        default=None,
        help="How games combine (default: max)",
    )
    parser.add_argument(
        "--per-game",
        action="store_true",
        help="Also write one readable deck per player per game",
    )
    parser.add_argument(
        "--legality",
        type=Path,
        default=None,
        help="JSON file with 'limited' and 'semi_limited' card lists",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment settings with command line options applied on top."""
    overrides: dict[str, Any] = {}
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.boundary is not None:
        overrides["game_boundary"] = GameBoundary(args.boundary)
    if args.actions is not None:
        overrides["enabled_actions"] = frozenset(ActionKind(a) for a in args.actions)
    if args.loose_banish:
        overrides["strict_banish"] = False
    if args.merge_policy is not None:
        overrides["merge_policy"] = MergePolicy(args.merge_policy)
    if args.per_game:
        overrides["emit_per_game"] = True
    if args.legality is not None:
        overrides["legality_path"] = args.legality
    return Settings(**overrides)


def print_report(report: ExportReport) -> None:
    """Print a summary of written and failed files."""
    if report.nothing_to_export:
        print("Nothing to export: no card events found in replay.")
        return

    print(f"Wrote {len(report.written)} files:")
    for path in report.written:
        print(f"  {path}")

    if report.unresolved_cards:
        print(f"\n{len(report.unresolved_cards)} cards have no serial (written as UNKNOWN):")
        for name in report.unresolved_cards:
            print(f"  {name}")

    if report.failures:
        print(f"\nFailed {len(report.failures)} files:")
        for failure in report.failures:
            print(f"  {failure.player}: {failure.path} ({failure.detail})")


def run(args: argparse.Namespace) -> int:
    """Run a reconstruction and return the process exit code."""
    try:
        config = settings_from_args(args)
    except (ValidationError, SettingsError) as e:
        logger.error("Invalid REPLAYDECK_* settings: %s", e)
        return 1

    try:
        legality = load_legality_table(config.legality_path)
        records = load_replay_file(args.replay)
    except KnownError as e:
        logger.error("%s %s", e.message, e.detail or "")
        if e.suggestion:
            print(e.suggestion)
        return 1

    logger.info("Loaded %d plays from %s", len(records), args.replay)
    report = run_reconstruction(records, config, legality)
    print_report(report)
    return 0 if report.ok else 1


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    raise SystemExit(run(build_parser().parse_args()))


if __name__ == "__main__":
    main()
