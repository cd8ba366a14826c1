"""Unit tests for src/guessing/multiplayer.py"""

import pytest

from src.core.exceptions import GameStateError, PlayerNotFoundError
from src.core.models import SessionModel
from src.core.shared_types import GameMode, Phase
from src.guessing.multiplayer import MultiGuessRecord, MultiplayerGame
from src.guessing.settings import GameSettings


@pytest.fixture
def new_game() -> MultiplayerGame:
    """3 players, nobody set up yet."""
    return MultiplayerGame.new_game(GameSettings(player_count=3))


# -- CREATION LOGIC --
def test_new_game(new_game: MultiplayerGame) -> None:
    assert [player.name for player in new_game.players] == [
        "Player 1",
        "Player 2",
        "Player 3",
    ]
    assert all(player.secret_number == "" for player in new_game.players)
    assert not any(player.eliminated for player in new_game.players)
    assert new_game.current_setup_player == 0
    assert new_game.current_guesser == 0
    assert new_game.phase == Phase.SETUP
    assert new_game.active_players == [0, 1, 2]
    assert not new_game.game_over
    assert new_game.winner is None


def test_model_roundtrip(three_player_game: MultiplayerGame) -> None:
    three_player_game.submit_guess("111", target_id=1)
    model = three_player_game.to_model()
    assert isinstance(model, SessionModel)
    assert model.mode == GameMode.MULTI
    assert model.phase == "guessing"
    assert MultiplayerGame.from_model(model) == three_player_game


def test_invalid_phase_name(three_player_game: MultiplayerGame) -> None:
    model = three_player_game.to_model()
    model.phase = "not_existing"
    with pytest.raises(GameStateError):
        _ = MultiplayerGame.from_model(model)


# -- SETUP PHASE --
def test_save_player_setup(new_game: MultiplayerGame) -> None:
    result = new_game.save_player_setup("Alice", "123")
    assert result.accepted
    assert result.message == "Alice is ready."
    assert new_game.players[0].name == "Alice"
    assert new_game.players[0].secret_number == "123"
    assert new_game.current_setup_player == 1
    assert new_game.phase == Phase.SETUP


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_name_gets_default(new_game: MultiplayerGame, blank: str) -> None:
    new_game.save_player_setup("Alice", "123")
    new_game.save_player_setup(blank, "456")
    assert new_game.players[1].name == "Player 2"


def test_setup_number_is_padded(new_game: MultiplayerGame) -> None:
    new_game.save_player_setup("Alice", " 5 ")
    assert new_game.players[0].secret_number == "005"


@pytest.mark.parametrize(
    "number, message",
    [
        ("", "Please enter a number before submitting."),
        ("abc", "Please enter a valid number."),
        ("1000", "Please enter a number between 000 and 999."),
        ("0123", "Please enter exactly 3 digits."),
    ],
)
def test_invalid_setup_number(
    new_game: MultiplayerGame, number: str, message: str
) -> None:
    """Same player stays up, nothing is stored."""
    result = new_game.save_player_setup("Alice", number)
    assert not result.accepted
    assert result.message == message
    assert new_game.current_setup_player == 0
    assert new_game.players[0].name == "Player 1"
    assert new_game.players[0].secret_number == ""


def test_all_players_set_up_starts_guessing(
    three_player_game: MultiplayerGame,
) -> None:
    assert three_player_game.phase == Phase.GUESSING
    assert three_player_game.current_setup_player == 3
    assert three_player_game.current_guesser == 0
    assert [p.secret_number for p in three_player_game.players] == [
        "123",
        "456",
        "789",
    ]


def test_last_setup_message() -> None:
    game = MultiplayerGame.new_game(GameSettings())
    game.save_player_setup("Alice", "123")
    result = game.save_player_setup("Bob", "456")
    assert result.message == "All players are ready. Alice guesses first."


def test_setup_after_setup_phase(three_player_game: MultiplayerGame) -> None:
    with pytest.raises(GameStateError):
        _ = three_player_game.save_player_setup("Dave", "000")


# -- GUESSING PHASE --
def test_guess_during_setup_is_ignored(new_game: MultiplayerGame) -> None:
    result = new_game.submit_guess("123", target_id=1)
    assert not result.accepted
    assert new_game.players[1].guesses == []


def test_wrong_guess(three_player_game: MultiplayerGame) -> None:
    """Alice (0) guesses Bob's (1) number '456' with '465'."""
    result = three_player_game.submit_guess("465", target_id=1)
    assert result.accepted
    assert result.message == "Correct digits: 3, Correct positions: 1"
    assert three_player_game.players[1].guesses == [
        MultiGuessRecord(
            guesser_id=0,
            target_id=1,
            guess="465",
            correct=False,
            correct_digits=3,
            correct_positions=1,
        )
    ]
    assert not three_player_game.players[1].eliminated
    assert three_player_game.current_guesser == 1


def test_correct_guess_eliminates_target(three_player_game: MultiplayerGame) -> None:
    result = three_player_game.submit_guess("456", target_id=1)
    assert result.accepted
    assert result.message == "Alice guessed Bob's number! Bob is eliminated."
    assert three_player_game.players[1].eliminated
    assert three_player_game.players[1].guesses[-1].correct
    assert three_player_game.active_players == [0, 2]
    assert three_player_game.phase == Phase.GUESSING
    assert not three_player_game.game_over
    # Bob is out: the turn skips him
    assert three_player_game.current_guesser == 2


def test_last_player_standing_wins(three_player_game: MultiplayerGame) -> None:
    three_player_game.submit_guess("456", target_id=1)  # Alice eliminates Bob
    three_player_game.submit_guess("111", target_id=0)  # Charlie misses Alice
    result = three_player_game.submit_guess("789", target_id=2)  # Alice eliminates Charlie

    assert result.accepted
    assert result.message == (
        "Alice guessed Charlie's number! Charlie is eliminated. Alice wins!"
    )
    assert three_player_game.phase == Phase.FINISHED
    assert three_player_game.game_over
    assert three_player_game.active_players == [0]
    assert three_player_game.winner is three_player_game.players[0]
    # the winning guesser keeps the turn
    assert three_player_game.current_guesser == 0


def test_no_guessing_after_finish(three_player_game: MultiplayerGame) -> None:
    three_player_game.submit_guess("456", target_id=1)
    three_player_game.submit_guess("111", target_id=0)
    three_player_game.submit_guess("789", target_id=2)

    result = three_player_game.submit_guess("000", target_id=0)
    assert not result.accepted
    assert three_player_game.players[0].guesses[-1].guess == "111"


@pytest.mark.parametrize(
    "guess, message",
    [
        ("", "Please enter a number before submitting."),
        ("xyz", "Please enter a valid number."),
        ("1000", "Please enter a number between 000 and 999."),
    ],
)
def test_invalid_guess_keeps_turn(
    three_player_game: MultiplayerGame, guess: str, message: str
) -> None:
    result = three_player_game.submit_guess(guess, target_id=1)
    assert not result.accepted
    assert result.message == message
    assert three_player_game.current_guesser == 0
    assert three_player_game.players[1].guesses == []


def test_guess_is_padded(three_player_game: MultiplayerGame) -> None:
    three_player_game.submit_guess("45", target_id=1)
    assert three_player_game.players[1].guesses[0].guess == "045"


def test_cannot_target_yourself(three_player_game: MultiplayerGame) -> None:
    result = three_player_game.submit_guess("123", target_id=0)
    assert not result.accepted
    assert result.message == "You cannot guess your own number."
    assert not three_player_game.players[0].eliminated
    assert three_player_game.current_guesser == 0


def test_cannot_target_eliminated_player(three_player_game: MultiplayerGame) -> None:
    three_player_game.submit_guess("456", target_id=1)  # Alice eliminates Bob
    result = three_player_game.submit_guess("456", target_id=1)  # Charlie's turn
    assert not result.accepted
    assert result.message == "Bob has already been eliminated."
    assert three_player_game.current_guesser == 2


def test_unknown_target(three_player_game: MultiplayerGame) -> None:
    with pytest.raises(PlayerNotFoundError):
        _ = three_player_game.submit_guess("123", target_id=7)


# -- TURN ROTATION --
def test_next_guesser_wraps_around(three_player_game: MultiplayerGame) -> None:
    three_player_game.current_guesser = 2
    three_player_game.next_guesser()
    assert three_player_game.current_guesser == 0


def test_next_guesser_skips_eliminated(three_player_game: MultiplayerGame) -> None:
    three_player_game.players[1].eliminated = True
    three_player_game.active_players.remove(1)
    three_player_game.next_guesser()
    assert three_player_game.current_guesser == 2


def test_next_guesser_without_players(three_player_game: MultiplayerGame) -> None:
    three_player_game.active_players.clear()
    with pytest.raises(GameStateError):
        three_player_game.next_guesser()


def test_targets_for(three_player_game: MultiplayerGame) -> None:
    assert [p.name for p in three_player_game.targets_for(0)] == ["Bob", "Charlie"]
    three_player_game.submit_guess("789", target_id=2)
    assert [p.name for p in three_player_game.targets_for(1)] == ["Alice"]


def test_four_players_elimination_order() -> None:
    """Turn keeps rotating past every eliminated player until one is left."""
    game = MultiplayerGame.new_game(GameSettings(digit_count=2, player_count=4))
    for number in ["11", "22", "33", "44"]:
        game.save_player_setup("", number)

    game.submit_guess("22", target_id=1)  # P1 eliminates P2
    assert game.current_guesser == 2
    game.submit_guess("44", target_id=3)  # P3 eliminates P4
    assert game.current_guesser == 0
    game.submit_guess("99", target_id=2)  # P1 misses P3
    assert game.current_guesser == 2
    result = game.submit_guess("11", target_id=0)  # P3 eliminates P1

    assert result.message.endswith("Player 3 wins!")
    assert game.phase == Phase.FINISHED
    assert game.winner is game.players[2]
