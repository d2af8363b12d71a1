"""
Correctness scoring built on the edit distance.
"""

from .distance import levenshtein
from .models import (
    PERFECT_SCORE_THRESHOLD,
    ZERO_SCORE_THRESHOLD,
    Comparison,
    Guess,
    ReferenceText,
)


class InvalidInputError(ValueError):
    """Exception raised when a score cannot be defined for the inputs."""

    pass


def compute_score(distance: int, reference_length: int) -> float:
    """
    Compute the correctness percentage for an edit distance.

    Defined as ``100 - 100 * distance / reference_length``. An empty
    reference scores 100 against an empty guess and is rejected otherwise.

    Args:
        distance: Edit distance between reference and guess
        reference_length: Length of the reference text

    Returns:
        Correctness percentage (may be negative)

    Raises:
        InvalidInputError: If the score is undefined for the inputs
    """
    if distance < 0 or reference_length < 0:
        raise InvalidInputError(
            f"Distance and reference length must be non-negative: "
            f"distance={distance}, reference_length={reference_length}"
        )

    if reference_length == 0:
        if distance == 0:
            return 100.0
        raise InvalidInputError(
            "Reference text is empty; a non-empty guess cannot be scored against it"
        )

    return 100.0 - (100 * distance) / reference_length


def format_score(score: float) -> str:
    """
    Render a score with two decimals, clamped to 0.00-100.00.

    Args:
        score: Correctness percentage

    Returns:
        Display string such as ``"50.00"``
    """
    if score > PERFECT_SCORE_THRESHOLD:
        return f"{100.0:>3.2f}"
    if score < ZERO_SCORE_THRESHOLD:
        return f"{0.0:>3.2f}"
    return f"{score:>3.2f}"


def compare(reference: ReferenceText, guess: Guess) -> Comparison:
    """
    Compare a guess against the reference.

    Args:
        reference: Reference plaintext
        guess: Guessed plaintext

    Returns:
        Comparison holding the distance and score

    Raises:
        InvalidInputError: If the reference is empty and the guess is not
    """
    distance = levenshtein(reference.text, guess.text)
    score = compute_score(distance, reference.length)

    return Comparison(reference=reference, guess=guess, distance=distance, score=score)
