"""
===============================================================================
SORTBENCH - Benchmark Input Test Suite
===============================================================================
Tests for RGM digit parsing, identifier validation and random buffer fill.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from sortbench.core.inputs import (
    EmptyIdentifierError,
    IdentifierError,
    IdentifierTooLongError,
    InvalidIdentifierError,
    fill_random,
    parse_digits,
    validate_identifier,
)


# =============================================================================
# Test: Digit parser
# =============================================================================

class TestParseDigits:
    """Keep decimal digits in order, drop everything else."""

    def test_mixed_text(self):
        assert parse_digits("a1b2c3") == [1, 2, 3]

    def test_punctuation_and_spaces(self):
        assert parse_digits(" 12.345-6 ") == [1, 2, 3, 4, 5, 6]

    def test_zeros_kept(self):
        assert parse_digits("0070") == [0, 0, 7, 0]

    @pytest.mark.parametrize("text", ["", "abc", "   ", "-.-"])
    def test_no_digits_returns_none(self, text):
        assert parse_digits(text) is None

    def test_non_ascii_digits_ignored(self):
        """Superscripts and other Unicode digits are not decimal 0-9."""
        assert parse_digits("²٣") is None
        assert parse_digits("1²2") == [1, 2]


# =============================================================================
# Test: Identifier validation
# =============================================================================

class TestValidateIdentifier:

    def test_valid_with_newline(self):
        assert validate_identifier("12345678\n") == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_empty_line(self):
        with pytest.raises(EmptyIdentifierError):
            validate_identifier("\n")
        with pytest.raises(EmptyIdentifierError):
            validate_identifier("")

    def test_non_numeric(self):
        with pytest.raises(InvalidIdentifierError):
            validate_identifier("abc\n")

    def test_nine_digits_rejected(self):
        with pytest.raises(IdentifierTooLongError) as excinfo:
            validate_identifier("123456789")
        assert excinfo.value.n_digits == 9
        assert excinfo.value.max_digits == 8

    def test_length_counts_digits_only(self):
        """Separators do not count toward the 8-digit limit."""
        assert validate_identifier("1234-5678") == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_errors_are_value_errors(self):
        for cls in (EmptyIdentifierError, InvalidIdentifierError, IdentifierTooLongError):
            assert issubclass(cls, IdentifierError)
            assert issubclass(cls, ValueError)


# =============================================================================
# Test: Random fill
# =============================================================================

class TestFillRandom:

    def test_range_and_length(self):
        rng = np.random.default_rng(42)
        buf = [-1] * 1000
        fill_random(buf, 1000, rng)
        assert len(buf) == 1000
        assert min(buf) >= 0
        assert max(buf) < 10000
        assert all(isinstance(v, int) for v in buf)

    def test_only_prefix_overwritten(self):
        rng = np.random.default_rng(0)
        buf = [-1] * 10
        fill_random(buf, 4, rng)
        assert all(v >= 0 for v in buf[:4])
        assert buf[4:] == [-1] * 6

    def test_seeded_generator_reproducible(self):
        a = [0] * 50
        b = [0] * 50
        fill_random(a, 50, np.random.default_rng(7))
        fill_random(b, 50, np.random.default_rng(7))
        assert_array_equal(a, b)

    def test_count_larger_than_buffer(self):
        with pytest.raises(ValueError):
            fill_random([0] * 3, 5, np.random.default_rng(1))
