"""Scoring a guess against a target number."""

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class Feedback:
    correct_digits: int
    correct_positions: int

    def message(self) -> str:
        return f"Correct digits: {self.correct_digits}, Correct positions: {self.correct_positions}"

    def is_solved(self, digit_count: int) -> bool:
        return self.correct_positions == digit_count


def calculate_feedback(guess: str, target: str) -> Feedback:
    """
    Compare two equally long digit strings.
    ----

    * correct_positions: same digit on the same index
    * correct_digits: digits present in both, regardless of position (a multiset intersection).

    NOTE correct_digits INCLUDES the digits that are also in the correct position.
    Example: guess '1223' vs target '2213' --> 4 correct digits, 2 correct positions.
    """
    if len(guess) != len(target):
        raise ValueError(
            f"Guess and target must be of equal length. Got {guess!r} and {target!r}."
        )

    correct_positions = sum(g == t for g, t in zip(guess, target))
    correct_digits = sum((Counter(guess) & Counter(target)).values())
    return Feedback(correct_digits=correct_digits, correct_positions=correct_positions)
