"""
CLI main entry point for plaintext scoring.

Thin wrapper around the scoring engine - no business logic here.
"""

import argparse
import sys
from typing import Sequence, TextIO

from scoring import (
    InvalidInputError,
    ReferenceNotFoundError,
    compare,
    load_reference,
    read_guess,
)

from .output import (
    OutputFormatter,
    print_error,
    print_guess,
    print_prompt,
    print_reading_from,
    print_reference,
    print_reference_not_found,
    print_score,
    resolve_color,
)

EXIT_OK = 0
EXIT_FAILURE = 1

DEFAULT_PLAINTEXT_FILE = "plaintext.txt"


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Compare two strings using Levenshtein edit distance.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s -f secret.txt
  echo "my guess" | %(prog)s --file secret.txt --nocolor
        """,
    )

    parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=DEFAULT_PLAINTEXT_FILE,
        help=f'File from which to load plaintext (default: "{DEFAULT_PLAINTEXT_FILE}")',
    )

    parser.add_argument(
        "-n",
        "--nocolor",
        action="store_true",
        help="Disable color output",
    )

    return parser.parse_args(argv)


def run(args: argparse.Namespace, stdin: TextIO | None = None) -> int:
    """
    Score one guess against the reference file.

    Orchestrates the CLI workflow:
    1. Load the reference plaintext
    2. Prompt for and read the guess
    3. Compare and print the correctness score

    Args:
        args: Parsed command-line arguments
        stdin: Stream to read the guess from (default: standard input)

    Returns:
        Process exit code
    """
    formatter = OutputFormatter(color=resolve_color(args.nocolor))

    print_reading_from(formatter, args.file)

    reference, error = load_reference(args.file)
    if error is not None:
        if isinstance(error, ReferenceNotFoundError):
            print_reference_not_found(formatter, error.path)
        else:
            print_error(formatter, str(error))
        return EXIT_FAILURE

    print_reference(formatter, reference)

    # Ask for the guess on stdin
    print_prompt()
    guess, error = read_guess(stdin)
    if error is not None:
        print_error(formatter, str(error))
        return EXIT_FAILURE

    print_guess(formatter, guess)

    try:
        comparison = compare(reference, guess)
    except InvalidInputError as e:
        print_error(formatter, str(e))
        return EXIT_FAILURE

    print_score(formatter, comparison)

    return EXIT_OK


def main() -> None:
    """Main CLI entry point."""
    args = parse_arguments()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
