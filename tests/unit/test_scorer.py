"""
Unit tests for correctness scoring.
"""

import pytest

from scoring.models import Guess, ReferenceText
from scoring.scorer import InvalidInputError, compare, compute_score, format_score


class TestComputeScore:
    """Tests for compute_score function."""

    def test_half_correct(self):
        """Test score for a distance of half the reference length."""
        assert compute_score(3, 6) == 50.0

    def test_perfect(self):
        """Test that zero distance scores 100."""
        assert compute_score(0, 5) == 100.0

    def test_all_wrong(self):
        """Test that distance equal to length scores 0."""
        assert compute_score(3, 3) == 0.0

    def test_negative_when_guess_much_longer(self):
        """Test that the raw score can drop below zero."""
        assert compute_score(10, 5) == -100.0

    def test_empty_reference_empty_guess(self):
        """Test that an empty reference with zero distance scores 100."""
        assert compute_score(0, 0) == 100.0

    def test_empty_reference_non_empty_guess(self):
        """Test that an empty reference with a non-empty guess is rejected."""
        with pytest.raises(InvalidInputError, match="Reference text is empty"):
            compute_score(4, 0)

    def test_negative_inputs_rejected(self):
        """Test that negative distance or length is rejected."""
        with pytest.raises(InvalidInputError, match="non-negative"):
            compute_score(-1, 5)
        with pytest.raises(InvalidInputError, match="non-negative"):
            compute_score(1, -5)

    def test_invalid_input_is_value_error(self):
        """Test that InvalidInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            compute_score(1, 0)


class TestFormatScore:
    """Tests for format_score function."""

    def test_two_decimals(self):
        """Test that scores render with two decimal digits."""
        assert format_score(50.0) == "50.00"
        assert format_score(66.666666) == "66.67"
        assert format_score(5.5) == "5.50"

    def test_above_threshold_renders_100(self):
        """Test that scores above 99.9 render as exactly 100.00."""
        assert format_score(100.0) == "100.00"
        assert format_score(99.95) == "100.00"

    def test_at_threshold_not_clamped(self):
        """Test that exactly 99.9 is not clamped."""
        assert format_score(99.9) == "99.90"

    def test_below_threshold_renders_zero(self):
        """Test that scores below 0.01 render as exactly 0.00."""
        assert format_score(0.0) == "0.00"
        assert format_score(0.005) == "0.00"
        assert format_score(-250.0) == "0.00"

    def test_at_lower_threshold_not_clamped(self):
        """Test that exactly 0.01 is not clamped."""
        assert format_score(0.01) == "0.01"


class TestCompare:
    """Tests for compare function."""

    def test_kitten_sitting(self):
        """Test the kitten/sitting scenario."""
        comparison = compare(ReferenceText("plaintext.txt", "kitten"), Guess("sitting"))

        assert comparison.distance == 3
        assert comparison.score == 50.0
        assert format_score(comparison.score) == "50.00"

    def test_exact_guess(self):
        """Test that an exact guess is perfect."""
        comparison = compare(ReferenceText("plaintext.txt", "hello"), Guess("hello"))

        assert comparison.distance == 0
        assert comparison.is_perfect is True
        assert format_score(comparison.score) == "100.00"

    def test_completely_wrong_guess(self):
        """Test that a fully substituted guess scores zero."""
        comparison = compare(ReferenceText("plaintext.txt", "abc"), Guess("xyz"))

        assert comparison.distance == 3
        assert comparison.is_zero is True
        assert format_score(comparison.score) == "0.00"

    def test_empty_reference_and_guess(self):
        """Test that empty reference and empty guess do not crash."""
        comparison = compare(ReferenceText("plaintext.txt", ""), Guess(""))

        assert comparison.distance == 0
        assert format_score(comparison.score) == "100.00"

    def test_empty_reference_with_guess(self):
        """Test that scoring against an empty reference is rejected."""
        with pytest.raises(InvalidInputError):
            compare(ReferenceText("plaintext.txt", ""), Guess("anything"))

    def test_comparison_keeps_operands(self):
        """Test that the comparison references its inputs."""
        reference = ReferenceText("secret.txt", "abcd")
        guess = Guess("abce")
        comparison = compare(reference, guess)

        assert comparison.reference is reference
        assert comparison.guess is guess
        assert comparison.score == 75.0
