"""
Custom exceptions used across layers.

NOTE expected user-input problems (bad digits, duplicate guesses, ...) are NOT raised.
Those are returned as results by the game. The exceptions here signal contract violations by a caller.
"""


class GameError(Exception):
    """Top-level exception for anything going wrong inside the game backend."""


class GameStateError(GameError):
    """Operation does not fit the current mode / phase of the game."""


class PlayerNotFoundError(GameStateError):
    """Referring to a player index that does not exist in this game."""


class InvalidSettingsError(GameError):
    """Settings outside of the allowed bounds."""


class InvalidRequestError(GameError):
    """Request model could not be validated."""


class RepositoryError(GameError):
    """Something went wrong while fetching / storing a session."""
