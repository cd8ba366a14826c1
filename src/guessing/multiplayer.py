"""
Multiplayer game: every player picks a secret number, then players take turns guessing each other's numbers.
A correct guess eliminates the target. The last player standing wins.

All players share the same local session ("hot seat").

State machine: setup --> guessing --> finished (terminal).
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, PlayerNotFoundError
from src.core.models import SessionModel
from src.core.shared_types import GameMode, Phase
from src.guessing.feedback import calculate_feedback
from src.guessing.outcome import TurnResult
from src.guessing.settings import GameSettings
from src.guessing.validator import (
    EMPTY_INPUT_MESSAGE,
    ValidationResult,
    normalize_input,
    validate_guess,
)

logger = logging.getLogger(__name__)


def default_player_name(player_id: int) -> str:
    return f"Player {player_id + 1}"


@dataclass(frozen=True)
class MultiGuessRecord:
    guesser_id: int
    target_id: int
    guess: str
    correct: bool
    correct_digits: int
    correct_positions: int


@dataclass
class Player:
    id: int
    name: str
    secret_number: str = ""
    guesses: list[MultiGuessRecord] = field(default_factory=list)
    eliminated: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        return cls(
            id=data["id"],
            name=data["name"],
            secret_number=data["secret_number"],
            guesses=[MultiGuessRecord(**record) for record in data["guesses"]],
            eliminated=data["eliminated"],
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MultiplayerGame:
    # --- DOMAIN LAYER API CALLED BY SESSION / SERVICE ---

    settings: GameSettings
    players: list[Player]
    current_setup_player: int
    current_guesser: int
    phase: Phase
    active_players: list[int]  # ids, in seating order
    game_over: bool = False

    @classmethod
    def new_game(cls, settings: GameSettings) -> Self:
        """All players get a default name and still need to pick their secret number."""
        players = [
            Player(id=i, name=default_player_name(i))
            for i in range(settings.player_count)
        ]
        logger.info(
            "New multiplayer game: %d players, %d digits",
            settings.player_count,
            settings.digit_count,
        )
        return cls(
            settings=settings,
            players=players,
            current_setup_player=0,
            current_guesser=0,
            phase=Phase.SETUP,
            active_players=[player.id for player in players],
        )

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        """Define how to construct a MultiplayerGame from the information the Service layer actually has"""
        if model.phase not in {phase.value for phase in Phase}:
            raise GameStateError(
                f"Invalid phase: {model.phase!r}. \nPick one from {','.join(phase.value for phase in Phase)}"
            )
        return cls(
            settings=GameSettings.from_dict(model.settings),
            players=[Player.from_dict(player) for player in model.players],
            current_setup_player=model.current_setup_player,
            current_guesser=model.current_guesser,
            phase=Phase(model.phase),
            active_players=list(model.active_players),
            game_over=model.game_over,
        )

    def to_model(self) -> SessionModel:
        """Encode back into a format the Service layer uses"""
        return SessionModel(
            mode=GameMode.MULTI,
            settings=self.settings.to_dict(),
            game_over=self.game_over,
            players=[player.to_dict() for player in self.players],
            current_setup_player=self.current_setup_player,
            current_guesser=self.current_guesser,
            phase=self.phase.value,
            active_players=list(self.active_players),
        )

    @property
    def winner(self) -> Optional[Player]:
        """Only once the game is finished: the one player left standing."""
        if self.phase != Phase.FINISHED or len(self.active_players) != 1:
            return None
        return self.players[self.active_players[0]]

    @property
    def setup_player(self) -> Player:
        return self._get_player(self.current_setup_player)

    @property
    def guesser(self) -> Player:
        return self._get_player(self.current_guesser)

    def targets_for(self, player_id: int) -> list[Player]:
        """Players that can be picked as target by player_id: still in the game, and not yourself."""
        return [
            self.players[target_id]
            for target_id in self.active_players
            if target_id != player_id
        ]

    def save_player_setup(self, name: str, raw_number: str) -> TurnResult:
        """
        The player whose turn it is to set up picks a name and a secret number.
        ----

        1. Blank name? --> use the default name
        2. Trim / pad / validate the number. Invalid? --> report, and the same player stays up
        3. Store name and number, move on to the next player
        4. Everyone set up? --> guessing phase (player 0 guesses first)
        """
        if self.phase != Phase.SETUP:
            raise GameStateError(f"Game is not in setup. phase: {self.phase}")

        player = self.setup_player
        number = normalize_input(raw_number, self.settings.digit_count)
        validation = self._validate(number)
        if not validation.valid:
            logger.debug("Rejected setup for %s: %s", player.name, validation.message)
            return TurnResult.rejected(validation.message)

        player.name = name.strip() or default_player_name(player.id)
        player.secret_number = number
        self.current_setup_player += 1
        logger.info("%s finished setup", player.name)

        if self.current_setup_player >= self.settings.player_count:
            self._change_phase(Phase.GUESSING)
            return TurnResult(
                True, f"All players are ready. {self.guesser.name} guesses first."
            )
        return TurnResult(True, f"{player.name} is ready.")

    def submit_guess(self, raw_guess: str, target_id: int) -> TurnResult:
        """
        The current guesser guesses the secret number of the target player
        -----

        1. Ignore if not in the guessing phase
        2. Reject targeting yourself or an eliminated player
        3. Trim / pad / validate the guess. Invalid? --> report, turn does NOT pass
        4. Record the guess (with feedback) on the target player
        5. Correct? --> target is eliminated. Last one standing? --> game finished (turn does NOT pass)
        6. Otherwise the turn passes to the next player still in the game
        """
        if self.phase != Phase.GUESSING:
            return TurnResult.ignored()

        guesser = self.guesser
        target = self._get_player(target_id)
        if target.id == guesser.id:
            return TurnResult.rejected("You cannot guess your own number.")
        if target.eliminated:
            return TurnResult.rejected(f"{target.name} has already been eliminated.")

        guess = normalize_input(raw_guess, self.settings.digit_count)
        validation = self._validate(guess)
        if not validation.valid:
            logger.debug("Rejected guess by %s: %s", guesser.name, validation.message)
            return TurnResult.rejected(validation.message)

        correct = guess == target.secret_number
        feedback = calculate_feedback(guess, target.secret_number)
        target.guesses.append(
            MultiGuessRecord(
                guesser_id=guesser.id,
                target_id=target.id,
                guess=guess,
                correct=correct,
                correct_digits=feedback.correct_digits,
                correct_positions=feedback.correct_positions,
            )
        )

        if not correct:
            self.next_guesser()
            return TurnResult(True, feedback.message(), feedback)

        self._eliminate(target)
        message = f"{guesser.name} guessed {target.name}'s number! {target.name} is eliminated."

        if len(self.active_players) == 1:
            self._finish()
            winner = self.players[self.active_players[0]]
            return TurnResult(True, f"{message} {winner.name} wins!", feedback)

        self.next_guesser()
        return TurnResult(True, message, feedback)

    def next_guesser(self) -> None:
        """Pass the turn to the next player (in seating order) that is not eliminated."""
        if not self.active_players:
            raise GameStateError("No players left to take a turn.")

        player_count = self.settings.player_count
        next_id = (self.current_guesser + 1) % player_count
        while self.players[next_id].eliminated:
            next_id = (next_id + 1) % player_count
        self.current_guesser = next_id

    def set_game_over(self, is_over: bool) -> None:
        self.game_over = is_over

    # -- PRIVATE HELPERS ---
    def _get_player(self, player_id: int) -> Player:
        if not (0 <= player_id < len(self.players)):
            raise PlayerNotFoundError(
                f"No player with id {player_id}. This game has {len(self.players)} players."
            )
        return self.players[player_id]

    def _validate(self, number: str) -> ValidationResult:
        if not number:
            return ValidationResult.fail(EMPTY_INPUT_MESSAGE)
        return validate_guess(number, self.settings.digit_count)

    def _eliminate(self, player: Player) -> None:
        player.eliminated = True
        self.active_players.remove(player.id)
        logger.info("%s has been eliminated", player.name)

    def _finish(self) -> None:
        self._change_phase(Phase.FINISHED)
        self.set_game_over(True)
        # for the type checker: only called with a single active player left
        assert self.winner is not None
        logger.info("Multiplayer game finished. %s wins", self.winner.name)

    def _change_phase(self, new_phase: Phase) -> None:
        self.phase = new_phase
