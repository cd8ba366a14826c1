"""
Type definitions used across layers
"""

from enum import StrEnum


class GameMode(StrEnum):
    SINGLE = "single"
    MULTI = "multi"


class Phase(StrEnum):
    SETUP = "setup"
    GUESSING = "guessing"
    FINISHED = "finished"
