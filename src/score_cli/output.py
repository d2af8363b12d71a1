"""
Terminal output formatter for CLI.

Handles all display logic - no business logic, just presentation.
"""

import os
import sys
from typing import Mapping

from scoring import format_score
from scoring.models import Comparison, Guess, ReferenceText

# ANSI SGR foreground colours
GREEN = "32"
RED = "31"
BLUE = "34"


def resolve_color(nocolor: bool, environ: Mapping[str, str] | None = None) -> bool:
    """
    Decide whether coloured output should be used.

    ``--nocolor`` always wins. Otherwise ``NO_COLOR`` disables colour,
    ``CLICOLOR_FORCE`` forces it on and ``CLICOLOR=0`` disables it.

    Args:
        nocolor: Value of the --nocolor switch
        environ: Environment mapping (default: os.environ)

    Returns:
        True if output should be coloured
    """
    if nocolor:
        return False

    if environ is None:
        environ = os.environ

    if environ.get("NO_COLOR"):
        return False
    if environ.get("CLICOLOR_FORCE", "0") != "0":
        return True
    if environ.get("CLICOLOR") == "0":
        return False

    return True


class OutputFormatter:
    """
    Paints text for the terminal according to a fixed colour policy.

    The policy is chosen once at construction; nothing else changes it.
    """

    def __init__(self, color: bool = True) -> None:
        """
        Initialize the formatter.

        Args:
            color: Whether to wrap text in ANSI colour codes
        """
        self.color = color

    def paint(self, text: str, code: str) -> str:
        """Wrap text in an ANSI colour code when colour is enabled."""
        if not self.color:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def green(self, text: str) -> str:
        """Paint text green."""
        return self.paint(text, GREEN)

    def red(self, text: str) -> str:
        """Paint text red."""
        return self.paint(text, RED)

    def blue(self, text: str) -> str:
        """Paint text blue."""
        return self.paint(text, BLUE)

    def score(self, comparison: Comparison) -> str:
        """
        Render the score, coloured by how it displays.

        100.00 is green, 0.00 is red and anything in between is blue.
        """
        text = format_score(comparison.score)

        if comparison.is_perfect:
            return self.green(text)
        if comparison.is_zero:
            return self.red(text)
        return self.blue(text)


def quote_path(path: str) -> str:
    return f'"{path}"'


def print_reading_from(formatter: OutputFormatter, path: str) -> None:
    print(f"Reading plaintext from {formatter.green(quote_path(path))}")


def print_reference_not_found(formatter: OutputFormatter, path: str) -> None:
    print(
        f"Error: Plaintext file {formatter.red(quote_path(path))} doesn't exist.",
        file=sys.stderr,
    )


def print_error(formatter: OutputFormatter, message: str) -> None:
    print(f"{formatter.red('Error:')} {message}", file=sys.stderr)


def print_reference(formatter: OutputFormatter, reference: ReferenceText) -> None:
    print(f"Plaintext:\n{formatter.blue(reference.text)}")


def print_prompt() -> None:
    print("Enter the guessed plaintext followed by a newline:", flush=True)


def print_guess(formatter: OutputFormatter, guess: Guess) -> None:
    print(f"\nGuessed plaintext:\n{formatter.green(guess.text)}")


def print_score(formatter: OutputFormatter, comparison: Comparison) -> None:
    """
    Print the overall correctness score.

    Args:
        formatter: Formatter holding the colour policy
        comparison: Comparison to display
    """
    print(f"Correctness: {formatter.score(comparison)}")
