"""Result of a player action, handed back to the caller (the game never raises for bad user input)."""

from dataclasses import dataclass
from typing import Optional, Self

from src.guessing.feedback import Feedback


@dataclass(frozen=True)
class TurnResult:
    accepted: bool
    message: str = ""
    feedback: Optional[Feedback] = None

    @classmethod
    def rejected(cls, message: str) -> Self:
        """Input was not valid. Nothing in the game state changed."""
        return cls(accepted=False, message=message)

    @classmethod
    def ignored(cls) -> Self:
        """Game is not accepting this action right now (e.g. it is already over)."""
        return cls(accepted=False)
