"""
Core data models for plaintext scoring.

All models are immutable value objects that live for a single comparison.
"""

from dataclasses import dataclass

# Scores above this render as a perfect 100.00
PERFECT_SCORE_THRESHOLD = 99.9

# Scores below this (negative ones included) render as 0.00
ZERO_SCORE_THRESHOLD = 0.01


@dataclass(frozen=True)
class ReferenceText:
    """
    Reference plaintext loaded from a file.

    Treated as ground truth for the comparison.
    """

    path: str
    text: str

    @property
    def length(self) -> int:
        """Number of Unicode code points in the reference."""
        return len(self.text)


@dataclass(frozen=True)
class Guess:
    """A guessed plaintext read from standard input."""

    text: str

    @property
    def length(self) -> int:
        """Number of Unicode code points in the guess."""
        return len(self.text)


@dataclass(frozen=True)
class Comparison:
    """
    Result of comparing a guess against a reference.

    ``score`` is the correctness percentage derived from ``distance``; it can
    be negative when the guess is much longer than the reference.
    """

    reference: ReferenceText
    guess: Guess
    distance: int
    score: float

    @property
    def is_perfect(self) -> bool:
        """Check if the score renders as 100.00."""
        return self.score > PERFECT_SCORE_THRESHOLD

    @property
    def is_zero(self) -> bool:
        """Check if the score renders as 0.00."""
        return self.score < ZERO_SCORE_THRESHOLD
