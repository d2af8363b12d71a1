"""
Levenshtein edit distance.

Strings are compared element by element, which for Python ``str`` means one
Unicode code point at a time. Grapheme clusters are not segmented.
"""

from typing import Sequence


def levenshtein(a: Sequence, b: Sequence) -> int:
    """
    Compute the Levenshtein distance between two sequences.

    The distance is the minimum number of single-element insertions,
    deletions or substitutions needed to turn ``a`` into ``b``. Only two rows
    of the cost table are kept, each sized by the shorter operand.

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        Edit distance between ``a`` and ``b``
    """
    if len(a) < len(b):
        a, b = b, a

    # b is now the shorter operand
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))

    for i, a_item in enumerate(a, 1):
        current = [i] + [0] * len(b)

        for j, b_item in enumerate(b, 1):
            if a_item == b_item:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(
                    previous[j],  # deletion
                    current[j - 1],  # insertion
                    previous[j - 1],  # substitution
                )

        previous = current

    return previous[len(b)]
