"""Implementation of (Session)Repository keeping everything in a dictionary for the lifetime of the process"""

import logging
from copy import deepcopy
from uuid import UUID, uuid4

from src.core.models import SessionModel

logger = logging.getLogger(__name__)


class InMemorySessionRepository:
    """
    Sessions stored by ID.

    NOTE records are deep-copied on the way in and out, so a caller mutating a model it got back
    does not change the stored record behind the repository's back.
    """

    def __init__(self) -> None:
        self._sessions: dict[UUID, SessionModel] = {}

    def get_session(self, session_id: UUID) -> SessionModel | None:
        """Get session by ID, if record exists."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        return deepcopy(session)

    def create_session(self, session: SessionModel) -> tuple[SessionModel, UUID]:
        """Store new session and return the stored data + newly created session ID."""
        new_id = uuid4()
        self._sessions[new_id] = deepcopy(session)
        logger.debug("Created session %s", new_id)
        return deepcopy(session), new_id

    def update_session(
        self, session_id: UUID, session: SessionModel
    ) -> SessionModel | None:
        """Replace the stored record."""
        if session_id not in self._sessions:
            return None
        self._sessions[session_id] = deepcopy(session)
        return deepcopy(session)

    def delete_session(self, session_id: UUID) -> SessionModel | None:
        """Remove a session's record."""
        session = self._sessions.pop(session_id, None)
        if session is not None:
            logger.debug("Deleted session %s", session_id)
        return session

    def clear(self) -> None:
        self._sessions.clear()
