"""
Single player game: guess the hidden number within the attempt budget.

State machine: active --> game over (terminal). A new game replaces the instance entirely.
"""

import logging
import random
import string
from dataclasses import asdict, dataclass, field
from typing import Optional, Self

from src.core.models import SessionModel
from src.core.shared_types import GameMode
from src.guessing.feedback import calculate_feedback
from src.guessing.outcome import TurnResult
from src.guessing.settings import GameSettings
from src.guessing.validator import (
    EMPTY_INPUT_MESSAGE,
    normalize_input,
    validate_guess,
)

logger = logging.getLogger(__name__)


def generate_target_number(digit_count: int) -> str:
    """Uniformly random over [0, 10^digit_count - 1], padded with leading zeros (every digit drawn independently)."""
    return "".join(random.choices(string.digits, k=digit_count))


@dataclass(frozen=True)
class GuessRecord:
    guess: str
    correct_digits: int
    correct_positions: int


@dataclass
class SinglePlayerGame:
    settings: GameSettings
    target_number: str
    attempts_left: int
    game_over: bool = False
    guess_history: list[GuessRecord] = field(default_factory=list)

    @classmethod
    def new_game(
        cls, settings: GameSettings, target_number: Optional[str] = None
    ) -> Self:
        """Fresh game with a new (random, unless given) target number."""
        target = target_number or generate_target_number(settings.digit_count)
        logger.info(
            "New single player game: %d digits, %d attempts",
            settings.digit_count,
            settings.max_attempts,
        )
        logger.debug("Target number: %s", target)
        return cls(
            settings=settings,
            target_number=target,
            attempts_left=settings.max_attempts,
        )

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        return cls(
            settings=GameSettings.from_dict(model.settings),
            target_number=model.target_number,
            attempts_left=model.attempts_left,
            game_over=model.game_over,
            guess_history=[GuessRecord(**record) for record in model.guess_history],
        )

    def to_model(self) -> SessionModel:
        return SessionModel(
            mode=GameMode.SINGLE,
            settings=self.settings.to_dict(),
            game_over=self.game_over,
            target_number=self.target_number,
            attempts_left=self.attempts_left,
            guess_history=[asdict(record) for record in self.guess_history],
        )

    @property
    def attempts_used(self) -> int:
        return self.settings.max_attempts - self.attempts_left

    @property
    def won(self) -> bool:
        if not self.guess_history:
            return False
        return self.guess_history[-1].guess == self.target_number

    def has_guessed(self, guess: str) -> bool:
        return any(record.guess == guess for record in self.guess_history)

    def submit_guess(self, raw: str) -> TurnResult:
        """
        Attempt a guess
        -----

        1. Ignore if the game is over
        2. Trim / pad the input
        3. Reject empty input, repeated guesses and invalid numbers (these do NOT cost an attempt)
        4. Score the guess and store it
        5. Check for the end of the game (win or out of attempts)
        """
        if self.game_over:
            return TurnResult.ignored()

        guess = normalize_input(raw, self.settings.digit_count)
        if not guess:
            return TurnResult.rejected(EMPTY_INPUT_MESSAGE)

        if self.has_guessed(guess):
            logger.debug("Rejected repeated guess %s", guess)
            return TurnResult.rejected(f"You've already guessed {guess}.")

        validation = validate_guess(guess, self.settings.digit_count)
        if not validation.valid:
            logger.debug("Rejected guess %r: %s", guess, validation.message)
            return TurnResult.rejected(validation.message)

        feedback = calculate_feedback(guess, self.target_number)
        self.add_guess(
            GuessRecord(
                guess=guess,
                correct_digits=feedback.correct_digits,
                correct_positions=feedback.correct_positions,
            )
        )

        if feedback.is_solved(self.settings.digit_count):
            self.set_game_over(True)
            logger.info("Single player game won in %d attempt(s)", self.attempts_used)
            return TurnResult(True, self._win_message(), feedback)

        if self.attempts_left == 0:
            self.set_game_over(True)
            logger.info("Single player game lost. Target was %s", self.target_number)
            return TurnResult(True, self._loss_message(), feedback)

        return TurnResult(True, feedback.message(), feedback)

    def add_guess(self, record: GuessRecord) -> None:
        """Store a scored guess. Every stored guess costs one attempt."""
        self.guess_history.append(record)
        self.attempts_left -= 1

    def set_game_over(self, is_over: bool) -> None:
        self.game_over = is_over

    # -- MESSAGES --
    def _win_message(self) -> str:
        used = self.attempts_used
        return (
            f"Congratulations! You guessed the number {self.target_number} correctly! "
            f"You won with {used} attempt{'' if used == 1 else 's'}!"
        )

    def _loss_message(self) -> str:
        return (
            "Game Over! You've used all your attempts. "
            f"The correct number was: {self.target_number}"
        )

