"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/storage layers (lower) use the model defined here to send to/receive from the Service
(Decouples the data model specific to the storage layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Any

# Type aliases to make SessionModel easier to read
SettingName = str
GuessRecordData = dict[str, Any]
PlayerData = dict[str, Any]


@dataclass
class SessionModel:
    """Transport-safe representation of a game session. Only plain strings, ints, lists and dicts."""

    mode: str
    settings: dict[SettingName, int]
    game_over: bool = False

    # single player
    target_number: str = ""
    attempts_left: int = 0
    guess_history: list[GuessRecordData] = field(default_factory=list)

    # multiplayer
    players: list[PlayerData] = field(default_factory=list)
    current_setup_player: int = 0
    current_guesser: int = 0
    phase: str = "setup"
    active_players: list[int] = field(default_factory=list)
