"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Iterator

import pytest

from src.guessing.multiplayer import MultiplayerGame
from src.guessing.settings import GameSettings
from src.guessing.single_player import SinglePlayerGame
from src.storage.memory_repository import InMemorySessionRepository


@pytest.fixture
def settings() -> GameSettings:
    """The defaults: 3 digits, 7 attempts, 2 players."""
    return GameSettings()


@pytest.fixture
def single_game(settings: GameSettings) -> SinglePlayerGame:
    """Single player game with a known target number."""
    return SinglePlayerGame.new_game(settings, target_number="427")


@pytest.fixture
def three_player_game() -> MultiplayerGame:
    """Multiplayer game with 3 players that all finished setup: secrets '123', '456' and '789'."""
    game = MultiplayerGame.new_game(GameSettings(digit_count=3, player_count=3))
    for name, number in [("Alice", "123"), ("Bob", "456"), ("Charlie", "789")]:
        result = game.save_player_setup(name, number)
        assert result.accepted
    return game


@pytest.fixture
def memory_repository() -> Iterator[InMemorySessionRepository]:
    """Ensures to clear the repository between tests"""
    repo = InMemorySessionRepository()
    try:
        yield repo
    finally:
        repo.clear()
