"""
Plaintext scoring engine.

Compares a guessed plaintext against a reference using Levenshtein edit
distance. Kept free of printing and process control so the CLI stays a thin
wrapper.
"""

from .distance import levenshtein
from .models import Comparison, Guess, ReferenceText
from .reader import ReadError, ReferenceNotFoundError, load_reference, read_guess
from .scorer import InvalidInputError, compare, compute_score, format_score

__all__ = [
    # Models
    "ReferenceText",
    "Guess",
    "Comparison",
    # Errors
    "ReadError",
    "ReferenceNotFoundError",
    "InvalidInputError",
    # Operations
    "levenshtein",
    "compute_score",
    "format_score",
    "compare",
    "load_reference",
    "read_guess",
]
