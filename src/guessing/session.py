"""
The GameSession is the entrypoint into the domain layer for the service layer (or any presentation layer).

It owns exactly one game at a time: a SinglePlayerGame or a MultiplayerGame, selected by the mode.
Starting a new game, changing the settings or switching mode replaces that game entirely.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import SessionModel
from src.core.shared_types import GameMode
from src.guessing.multiplayer import MultiplayerGame
from src.guessing.outcome import TurnResult
from src.guessing.settings import GameSettings
from src.guessing.single_player import SinglePlayerGame

logger = logging.getLogger(__name__)

ActiveGame = SinglePlayerGame | MultiplayerGame


def create_game(mode: GameMode, settings: GameSettings) -> ActiveGame:
    match mode:
        case GameMode.SINGLE:
            return SinglePlayerGame.new_game(settings)
        case GameMode.MULTI:
            return MultiplayerGame.new_game(settings)
        case _:
            raise GameStateError(f"Unknown game mode: {mode!r}")


@dataclass
class GameSession:
    mode: GameMode
    settings: GameSettings
    game: ActiveGame

    @classmethod
    def create(
        cls, mode: GameMode = GameMode.SINGLE, settings: Optional[GameSettings] = None
    ) -> Self:
        settings = settings or GameSettings()
        return cls(mode=mode, settings=settings, game=create_game(mode, settings))

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        """Rebuild the session (and its game) from what the Service layer has stored."""
        if model.mode not in {mode.value for mode in GameMode}:
            raise GameStateError(
                f"Invalid game mode: {model.mode!r}. \nPick one from {','.join(mode.value for mode in GameMode)}"
            )
        mode = GameMode(model.mode)
        game: ActiveGame = (
            SinglePlayerGame.from_model(model)
            if mode == GameMode.SINGLE
            else MultiplayerGame.from_model(model)
        )
        return cls(mode=mode, settings=game.settings, game=game)

    def to_model(self) -> SessionModel:
        return self.game.to_model()

    # -- LIFECYCLE --
    def start_new_game(
        self, mode: Optional[GameMode] = None, settings: Optional[GameSettings] = None
    ) -> None:
        """Replace the current game. Mode and settings are kept unless new ones are given."""
        if mode is not None:
            self.mode = mode
        if settings is not None:
            self.settings = settings
        self.game = create_game(self.mode, self.settings)

    def update_settings(self, **changes: int) -> None:
        """Settings are replaced wholesale, which always starts a new game."""
        new_settings = self.settings.replace(**changes)
        logger.info("Settings changed: %s", new_settings.to_dict())
        self.start_new_game(settings=new_settings)

    def set_mode(self, mode: GameMode) -> None:
        self.start_new_game(mode=mode)

    def reset(self) -> None:
        """Back to the initial state: single player with default settings."""
        self.start_new_game(mode=GameMode.SINGLE, settings=GameSettings())

    # -- PLAYER ACTIONS --
    def submit_guess(self, raw: str, target_id: Optional[int] = None) -> TurnResult:
        match self.game:
            case SinglePlayerGame():
                return self.game.submit_guess(raw)
            case MultiplayerGame():
                if target_id is None:
                    raise GameStateError("A multiplayer guess needs a target player.")
                return self.game.submit_guess(raw, target_id)

    def save_player_setup(self, name: str, number: str) -> TurnResult:
        if not isinstance(self.game, MultiplayerGame):
            raise GameStateError("Player setup only exists in multiplayer mode.")
        return self.game.save_player_setup(name, number)

    def set_game_over(self, is_over: bool) -> None:
        self.game.set_game_over(is_over)

    @property
    def game_over(self) -> bool:
        return self.game.game_over
