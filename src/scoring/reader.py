"""
Input readers for the reference file and the guess line.

Readers never terminate the process. Each returns a ``(value, error)`` tuple
so callers decide how to report failures.
"""

import sys
from pathlib import Path
from typing import TextIO

from .models import Guess, ReferenceText

LINE_TERMINATORS = ("\r\n", "\n", "\r")


class ReadError(Exception):
    """Base exception for read errors."""

    pass


class ReferenceNotFoundError(ReadError):
    """Exception raised when the reference file does not exist."""

    def __init__(self, path: str):
        super().__init__(f'Plaintext file "{path}" doesn\'t exist.')
        self.path = path


def strip_line_terminator(text: str) -> str:
    """
    Remove a single trailing line terminator.

    Only one terminator is removed; other trailing whitespace is kept.
    """
    for terminator in LINE_TERMINATORS:
        if text.endswith(terminator):
            return text[: -len(terminator)]
    return text


def load_reference(path: str) -> tuple[ReferenceText | None, ReadError | None]:
    """
    Load the reference plaintext from a UTF-8 file.

    Args:
        path: Path to the reference file

    Returns:
        Tuple of (ReferenceText, None) on success, or (None, ReadError) on failure
    """
    file_path = Path(path)

    if not file_path.exists():
        return None, ReferenceNotFoundError(str(path))

    try:
        # newline="" keeps \r\n intact so only the final terminator is dropped
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        return None, ReadError(f'Plaintext file "{path}" is not valid UTF-8: {e.reason}')
    except OSError as e:
        return None, ReadError(f'Failed to read plaintext file "{path}": {e.strerror or e}')

    return ReferenceText(path=str(path), text=strip_line_terminator(text)), None


def read_guess(stream: TextIO | None = None) -> tuple[Guess | None, ReadError | None]:
    """
    Read exactly one line from a text stream as the guess.

    End of input before any character yields an empty guess.

    Args:
        stream: Stream to read from (default: standard input)

    Returns:
        Tuple of (Guess, None) on success, or (None, ReadError) on failure
    """
    if stream is None:
        stream = sys.stdin

    try:
        line = stream.readline()
        # surrogateescape streams smuggle undecodable bytes through as lone surrogates
        line.encode("utf-8")
    except (UnicodeDecodeError, UnicodeEncodeError) as e:
        return None, ReadError(f"Guess is not valid UTF-8: {e.reason}")
    except (OSError, ValueError) as e:
        return None, ReadError(f"Failed to read guess from standard input: {e}")

    return Guess(text=strip_line_terminator(line)), None
