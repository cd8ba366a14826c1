"""
Configuration values for the game.

Defaults are used for a fresh (or reset) session.
The *_OPTIONS are the choices offered by the settings form of a presentation layer. Requests are checked against them.
"""

import logging

DEFAULT_DIGIT_COUNT = 3
DEFAULT_MAX_ATTEMPTS = 7
DEFAULT_PLAYER_COUNT = 2

DIGIT_COUNT_OPTIONS: tuple[int, ...] = (2, 3, 4, 5)
MAX_ATTEMPTS_OPTIONS: tuple[int, ...] = (3, 5, 7, 10, 15, 20)
PLAYER_COUNT_OPTIONS: tuple[int, ...] = (2, 3, 4)

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
