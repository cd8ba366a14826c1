"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, ValidationInfo, field_validator

from src.core.config import (
    DIGIT_COUNT_OPTIONS,
    MAX_ATTEMPTS_OPTIONS,
    PLAYER_COUNT_OPTIONS,
)
from src.core.exceptions import InvalidRequestError
from src.core.models import SessionModel
from src.core.shared_types import GameMode, Phase

SETTING_OPTIONS: dict[str, tuple[int, ...]] = {
    "digit_count": DIGIT_COUNT_OPTIONS,
    "max_attempts": MAX_ATTEMPTS_OPTIONS,
    "player_count": PLAYER_COUNT_OPTIONS,
}


class SettingsFields(BaseModel):
    """Settings a request may change. Left out (None) means: keep the current value."""

    digit_count: Optional[int] = None
    max_attempts: Optional[int] = None
    player_count: Optional[int] = None

    @field_validator(*SETTING_OPTIONS.keys())
    @classmethod
    def validate_option(
        cls, value: Optional[int], info: ValidationInfo
    ) -> Optional[int]:
        if value is None:
            return value

        options = SETTING_OPTIONS[info.field_name]
        if value not in options:
            raise InvalidRequestError(
                f"{info.field_name} must be one of {', '.join(str(o) for o in options)}. Got {value}."
            )
        return value

    def changes(self) -> dict[str, int]:
        return {
            name: value
            for name, value in self.model_dump(include=set(SETTING_OPTIONS)).items()
            if value is not None
        }


# --- REQUEST MODELS ---
class CreateSessionRequest(SettingsFields):
    mode: GameMode = GameMode.SINGLE


class NewGameRequest(BaseModel):
    session_id: UUID
    mode: Optional[GameMode] = None


class UpdateSettingsRequest(SettingsFields):
    session_id: UUID


class GuessRequest(BaseModel):
    session_id: UUID
    guess: str
    target_id: Optional[int] = None


class PlayerSetupRequest(BaseModel):
    session_id: UUID
    name: str = ""
    number: str


class GameOverRequest(BaseModel):
    session_id: UUID
    game_over: bool = True


class GetSessionRequest(BaseModel):
    session_id: UUID


class DeleteSessionRequest(BaseModel):
    session_id: UUID


# --- RESPONSE MODELS ---
class GuessRecordResponse(BaseModel):
    guess: str
    correct_digits: int
    correct_positions: int


class MultiGuessRecordResponse(GuessRecordResponse):
    guesser_id: int
    target_id: int
    correct: bool


class PlayerResponse(BaseModel):
    id: int
    name: str
    guesses: list[MultiGuessRecordResponse]
    eliminated: bool
    is_ready: bool
    secret_number: Optional[str]  # only revealed once the game is finished


class SettingsResponse(BaseModel):
    digit_count: int
    max_attempts: int
    player_count: int


class SessionResponse(BaseModel):
    session_id: UUID
    mode: GameMode
    settings: SettingsResponse
    game_over: bool

    # single player
    attempts_left: Optional[int] = None
    guess_history: list[GuessRecordResponse] = []
    target_number: Optional[str] = None  # only revealed once the game is over

    # multiplayer
    phase: Optional[Phase] = None
    players: list[PlayerResponse] = []
    current_setup_player: Optional[int] = None
    current_guesser: Optional[int] = None
    active_players: list[int] = []
    winner: Optional[int] = None

    @classmethod
    def from_model(cls, session_id: UUID, model: SessionModel) -> Self:
        """Hide the secrets while the game is still being played."""
        settings = SettingsResponse(**model.settings)
        if model.mode == GameMode.SINGLE:
            return cls(
                session_id=session_id,
                mode=GameMode.SINGLE,
                settings=settings,
                game_over=model.game_over,
                attempts_left=model.attempts_left,
                guess_history=[
                    GuessRecordResponse(**record) for record in model.guess_history
                ],
                target_number=model.target_number if model.game_over else None,
            )

        finished = model.phase == Phase.FINISHED
        return cls(
            session_id=session_id,
            mode=GameMode.MULTI,
            settings=settings,
            game_over=model.game_over,
            phase=Phase(model.phase),
            players=[
                PlayerResponse(
                    id=player["id"],
                    name=player["name"],
                    guesses=[
                        MultiGuessRecordResponse(**record)
                        for record in player["guesses"]
                    ],
                    eliminated=player["eliminated"],
                    is_ready=bool(player["secret_number"]),
                    secret_number=player["secret_number"] if finished else None,
                )
                for player in model.players
            ],
            current_setup_player=model.current_setup_player,
            current_guesser=model.current_guesser,
            active_players=model.active_players,
            winner=model.active_players[0]
            if finished and len(model.active_players) == 1
            else None,
        )


class FeedbackResponse(BaseModel):
    correct_digits: int
    correct_positions: int


class TurnResponse(BaseModel):
    accepted: bool
    message: str
    session: SessionResponse
    feedback: Optional[FeedbackResponse] = None  # only for a scored guess
