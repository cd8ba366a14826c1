"""Game settings: an immutable snapshot. Updating means replacing it (and starting a new game with it)."""

from dataclasses import asdict, dataclass, replace
from typing import Self

from src.core.config import (
    DEFAULT_DIGIT_COUNT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_PLAYER_COUNT,
)
from src.core.exceptions import InvalidSettingsError

MIN_DIGIT_COUNT = 1
MIN_MAX_ATTEMPTS = 1
MIN_PLAYER_COUNT = 2


@dataclass(frozen=True)
class GameSettings:
    digit_count: int = DEFAULT_DIGIT_COUNT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    player_count: int = DEFAULT_PLAYER_COUNT

    def __post_init__(self) -> None:
        bounds = {
            "digit_count": MIN_DIGIT_COUNT,
            "max_attempts": MIN_MAX_ATTEMPTS,
            "player_count": MIN_PLAYER_COUNT,
        }
        for name, minimum in bounds.items():
            value = getattr(self, name)
            # bool is an int subclass, but True digits makes no sense
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettingsError(
                    f"{name} must be an integer. Got {value!r}."
                )
            if value < minimum:
                raise InvalidSettingsError(
                    f"{name} must be at least {minimum}. Got {value}."
                )

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> Self:
        """Missing values fall back to the defaults."""
        return cls().replace(**data)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def replace(self, **changes: int) -> Self:
        """New snapshot with some values changed (unchanged values are carried over)."""
        unknown = set(changes) - set(self.to_dict())
        if unknown:
            raise InvalidSettingsError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)
