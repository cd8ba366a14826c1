"""Orchestration of communication from a presentation layer to game logic and storage layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateSessionRequest,
    DeleteSessionRequest,
    FeedbackResponse,
    GameOverRequest,
    GetSessionRequest,
    GuessRequest,
    NewGameRequest,
    PlayerSetupRequest,
    SessionResponse,
    TurnResponse,
    UpdateSettingsRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import SessionModel
from src.guessing.outcome import TurnResult
from src.guessing.session import GameSession
from src.guessing.settings import GameSettings
from src.storage.repository import SessionRepository

logger = logging.getLogger(__name__)


class GuessingService:
    """Orchestration of layers for the number guessing game."""

    def __init__(self, repository: SessionRepository) -> None:
        self.repo = repository

    # -- Session lifecycle --
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Start a session (and its first game) with the requested mode and settings."""

        settings = GameSettings().replace(**request.changes())
        session = GameSession.create(mode=request.mode, settings=settings)
        stored_model, session_id = self.repo.create_session(session.to_model())
        logger.info("Session %s created in %s mode", session_id, request.mode)
        return SessionResponse.from_model(session_id, stored_model)

    def get_session(self, request: GetSessionRequest) -> SessionResponse:
        """Retrieve current session state (for rendering)."""
        model = self._fetch_session(request.session_id)
        return SessionResponse.from_model(request.session_id, model)

    def start_new_game(self, request: NewGameRequest) -> SessionResponse:
        """Replace the game, optionally switching mode."""
        session = self._load(request.session_id)
        session.start_new_game(mode=request.mode)
        return self._save(request.session_id, session)

    def update_settings(self, request: UpdateSettingsRequest) -> SessionResponse:
        """Changing the settings always starts a new game."""
        session = self._load(request.session_id)
        session.update_settings(**request.changes())
        return self._save(request.session_id, session)

    def reset_session(self, request: GetSessionRequest) -> SessionResponse:
        session = self._load(request.session_id)
        session.reset()
        return self._save(request.session_id, session)

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to delete a session record."""
        self.repo.delete_session(request.session_id)

    # -- Player actions --
    def submit_guess(self, request: GuessRequest) -> TurnResponse:
        session = self._load(request.session_id)
        result = session.submit_guess(request.guess, target_id=request.target_id)
        return self._turn_response(request.session_id, session, result)

    def save_player_setup(self, request: PlayerSetupRequest) -> TurnResponse:
        session = self._load(request.session_id)
        result = session.save_player_setup(request.name, request.number)
        return self._turn_response(request.session_id, session, result)

    def set_game_over(self, request: GameOverRequest) -> SessionResponse:
        session = self._load(request.session_id)
        session.set_game_over(request.game_over)
        return self._save(request.session_id, session)

    # -- Internal helpers --
    def _turn_response(
        self, session_id: UUID, session: GameSession, result: TurnResult
    ) -> TurnResponse:
        """Rejected input does not change anything: only store the session when the action was accepted."""
        if result.accepted:
            response = self._save(session_id, session)
        else:
            response = SessionResponse.from_model(session_id, session.to_model())
        feedback = (
            FeedbackResponse(
                correct_digits=result.feedback.correct_digits,
                correct_positions=result.feedback.correct_positions,
            )
            if result.feedback
            else None
        )
        return TurnResponse(
            accepted=result.accepted,
            message=result.message,
            session=response,
            feedback=feedback,
        )

    def _load(self, session_id: UUID) -> GameSession:
        """Retrieve the stored SessionModel and rebuild the domain objects from it."""
        return GameSession.from_model(self._fetch_session(session_id))

    def _save(self, session_id: UUID, session: GameSession) -> SessionResponse:
        """Capture updated state in a SessionModel, store it, and respond with it."""
        model = session.to_model()
        self.repo.update_session(session_id, model)
        return SessionResponse.from_model(session_id, model)

    def _fetch_session(self, session_id: UUID) -> SessionModel:
        """Attempt to find the session in the repository and raise error if it fails."""
        model = self.repo.get_session(session_id)
        if model is None:
            raise RepositoryError(f"Session with {session_id=} not found.")
        return model
