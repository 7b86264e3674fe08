"""
Loader for saved DuelingBook replay payloads.

The view-replay response is a JSON object with a "plays" list:

    {"plays": [{"log": {...}, "card": {...}, "player1_choice": ..., ...}, ...]}

A bare list of plays is accepted too. Each play is validated into a
PlayRecord; plays that do not validate are skipped, the rest keep their
original order.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from replaydeck.models.failure import FailureKind, KnownError
from replaydeck.models.replay import PlayRecord

logger = logging.getLogger(__name__)

CHOICE_KEYS = ("player1_choice", "player2_choice")


def _is_valid_play(play: dict[str, Any]) -> bool:
    # Payloads that carry choice keys only count plays where both players chose
    if not any(key in play for key in CHOICE_KEYS):
        return True
    return all(play.get(key) for key in CHOICE_KEYS)


def parse_plays(plays: list[Any]) -> list[PlayRecord]:
    """
    Validate raw plays into PlayRecords.

    Args:
        plays: Raw play objects in replay order

    Returns:
        PlayRecords in the same order, malformed plays omitted
    """
    records: list[PlayRecord] = []
    skipped = 0

    for position, play in enumerate(plays):
        if not isinstance(play, dict):
            skipped += 1
            logger.debug("Skipping non-object play at position %d", position)
            continue
        if not _is_valid_play(play):
            skipped += 1
            continue
        try:
            records.append(PlayRecord.model_validate(play))
        except ValidationError as e:
            skipped += 1
            logger.debug("Skipping malformed play at position %d: %s", position, e)

    if skipped:
        logger.info(
            "replay_plays_skipped",
            extra={
                "kind": FailureKind.MALFORMED_RECORD.value,
                "skipped_count": skipped,
                "kept_count": len(records),
            },
        )
    return records


def load_replay_payload(payload: Any) -> list[PlayRecord]:
    """
    Extract PlayRecords from a decoded replay payload.

    Raises:
        KnownError: If the payload has no list of plays
    """
    if isinstance(payload, dict):
        plays = payload.get("plays")
    else:
        plays = payload

    if not isinstance(plays, list):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Replay payload does not contain a list of plays.",
            detail=f"Got {type(plays).__name__}",
            suggestion="Save the full view-replay JSON response, or a list of plays.",
        )

    return parse_plays(plays)


def load_replay_file(path: Path) -> list[PlayRecord]:
    """
    Load PlayRecords from a saved replay JSON file.

    Args:
        path: JSON file holding a view-replay payload

    Returns:
        PlayRecords in replay order

    Raises:
        KnownError: If the file is missing, is not JSON, or holds no plays
    """
    if not path.exists():
        raise KnownError(
            kind=FailureKind.NOT_FOUND,
            message=f"Replay file not found at {path}.",
        )

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Replay file at {path} is not valid JSON.",
            detail=str(e),
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Replay file at {path} could not be read.",
            detail=str(e),
        ) from e

    return load_replay_payload(payload)
