"""
Validation of raw guesses (and secret numbers picked during multiplayer setup).

Both game modes share the same steps:
1. normalize_input() --> trim whitespace, pad short numeric input with leading zeros
2. validate_guess() --> format, range and length checks

Failures are reported in a ValidationResult, never raised.
"""

from dataclasses import dataclass
from typing import Self

EMPTY_INPUT_MESSAGE = "Please enter a number before submitting."
INVALID_NUMBER_MESSAGE = "Please enter a valid number."


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: str = ""

    @classmethod
    def ok(cls) -> Self:
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> Self:
        return cls(valid=False, message=message)


def is_numeric(value: str) -> bool:
    """Only plain ASCII digits count. No signs, decimal points, exponents or other unicode digits."""
    return value.isascii() and value.isdigit()


def max_display(digit_count: int) -> str:
    """Largest number that fits in digit_count digits, e.g. '999' for 3 digits."""
    return "9" * digit_count


def normalize_input(raw: str, digit_count: int) -> str:
    """Trim the input and left-pad it with zeros (e.g. '7' -> '007') if it is numeric and too short."""
    value = raw.strip()
    if value and len(value) < digit_count and is_numeric(value):
        value = value.zfill(digit_count)
    return value


def validate_guess(raw: str, digit_count: int) -> ValidationResult:
    """
    Check a (normalized) guess against the digit count.
    ----

    NOTE the range check is done BEFORE the length check: '1000' for 3 digits reports the range.
    NOTE the range is computed on the numeric value (leading zeros ignored), the length on the literal string: '0012' for 3 digits reports the length.
    """
    if "-" in raw or not is_numeric(raw):
        return ValidationResult.fail(INVALID_NUMBER_MESSAGE)

    # significant digits only; int() refuses very long strings
    if len(raw.lstrip("0")) > digit_count:
        return ValidationResult.fail(
            f"Please enter a number between {'0' * digit_count} and {max_display(digit_count)}."
        )

    if len(raw) != digit_count:
        return ValidationResult.fail(f"Please enter exactly {digit_count} digits.")

    return ValidationResult.ok()
