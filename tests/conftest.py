from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from replaydeck.config import Settings
from replaydeck.models.replay import PlayRecord

PlayFactory = Callable[..., PlayRecord]


def _play(
    username: str | None = None,
    public_log: str = "",
    private_log: str = "",
    card: dict[str, Any] | None = None,
) -> PlayRecord:
    data: dict[str, Any] = {}
    if username is not None:
        data["log"] = {
            "username": username,
            "public_log": public_log,
            "private_log": private_log,
        }
    if card is not None:
        data["card"] = card
    return PlayRecord.model_validate(data)


def _game_start(*entries: dict[str, Any]) -> PlayRecord:
    return PlayRecord.model_validate({"log": list(entries)})


@pytest.fixture
def play() -> PlayFactory:
    """Factory for single-entry plays."""
    return _play


@pytest.fixture
def game_start() -> PlayFactory:
    """Factory for wrapper plays (log is a list), which open a new game."""
    return _game_start


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Default settings writing into a temporary directory."""
    return Settings(output_dir=tmp_path)


@pytest.fixture
def alice_two_games() -> list[PlayRecord]:
    """Alice draws Pot of Greed twice and Sangan once, then Pot of Greed once."""
    return [
        _game_start({"username": "Duelingbook", "public_log": "Game 1 started"}),
        _play("Alice", private_log='Drew "Pot of Greed"'),
        _play("Alice", private_log='Drew "Sangan"'),
        _play("Alice", private_log='Drew "Pot of Greed"'),
        _game_start({"username": "Duelingbook", "public_log": "Game 2 started"}),
        _play("Alice", private_log='Drew "Pot of Greed"'),
    ]


@pytest.fixture
def sample_replay_path() -> Path:
    """Saved view-replay payload with two games between Alice and Bob."""
    return Path(__file__).parent / "fixtures" / "sample_replay.json"
