"""Tests for edit distance and similarity."""

import pytest

from semsearch.search.distance import (
    MAX_DISTANCE_LENGTH,
    levenshtein_distance,
    string_similarity,
)


class TestLevenshteinDistance:
    """Tests for levenshtein_distance()."""

    def test_classic_example(self) -> None:
        """Test the textbook example."""
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_case_insensitive(self) -> None:
        """Test that case is ignored."""
        assert levenshtein_distance("Aprobado", "APROBADO") == 0

    def test_empty_inputs(self) -> None:
        """Test distance to the empty string."""
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abcd", "") == 4
        assert levenshtein_distance("", "") == 0

    def test_long_inputs_are_capped(self) -> None:
        """Test that overlong strings give the maximum length."""
        long_text = "a" * (MAX_DISTANCE_LENGTH + 1)
        assert levenshtein_distance(long_text, "b") == MAX_DISTANCE_LENGTH + 1
        assert levenshtein_distance("b", long_text) == MAX_DISTANCE_LENGTH + 1

    def test_symmetric(self) -> None:
        """Test argument order does not matter."""
        assert levenshtein_distance("pago", "pagar") == levenshtein_distance(
            "pagar", "pago"
        )


class TestStringSimilarity:
    """Tests for string_similarity()."""

    def test_identical(self) -> None:
        """Test identical strings."""
        assert string_similarity("codigo", "codigo") == 1.0

    def test_both_empty(self) -> None:
        """Test two empty strings are identical."""
        assert string_similarity("", "") == 1.0

    def test_one_empty(self) -> None:
        """Test one empty string."""
        assert string_similarity("", "abc") == 0.0

    def test_partial(self) -> None:
        """Test a known partial similarity."""
        assert string_similarity("kitten", "sitting") == pytest.approx(4 / 7)

    @pytest.mark.parametrize(
        ("a", "b"),
        [("aprobado", "aprobad"), ("qr", "codigo"), ("x" * 60, "y"), ("Pago", "pago")],
    )
    def test_bounds_and_symmetry(self, a: str, b: str) -> None:
        """Test that similarity stays in [0, 1] and is symmetric."""
        value = string_similarity(a, b)
        assert 0.0 <= value <= 1.0
        assert value == string_similarity(b, a)
