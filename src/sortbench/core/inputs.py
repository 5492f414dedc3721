"""
Benchmark input generation.

Two kinds of input feed the benchmark: the digits of the user's RGM
identifier (the deterministic "RGM" case) and buffers of uniformly
distributed random integers (the "Aleatorio" case).
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional

import numpy as np

from sortbench.core.constants import RANDOM_VALUE_LIMIT, RGM_MAX_DIGITS


class IdentifierError(ValueError):
    """Base class for rejected identifier input."""


class EmptyIdentifierError(IdentifierError):
    """The input line was empty."""


class InvalidIdentifierError(IdentifierError):
    """The input contains no decimal digits."""


class IdentifierTooLongError(IdentifierError):
    """The input contains more than ``RGM_MAX_DIGITS`` digits."""

    def __init__(self, n_digits: int, max_digits: int = RGM_MAX_DIGITS) -> None:
        super().__init__(
            f"identifier has {n_digits} digits, at most {max_digits} allowed"
        )
        self.n_digits = n_digits
        self.max_digits = max_digits


def parse_digits(text: str) -> Optional[List[int]]:
    """Extract the decimal digits of *text* in order.

    Every character outside ``0``-``9`` is discarded.  Returns ``None``
    when no digit is present, so callers can tell "not a number" apart
    from a parsed sequence.

    >>> parse_digits("a1b2c3")
    [1, 2, 3]
    >>> parse_digits("abc") is None
    True
    """
    # str.isdigit() also accepts superscripts and other Unicode digits.
    digits = [ord(ch) - ord("0") for ch in text if "0" <= ch <= "9"]
    if not digits:
        return None
    return digits


def validate_identifier(text: str, max_digits: int = RGM_MAX_DIGITS) -> List[int]:
    """Parse one line of user input into the RGM digit sequence.

    Raises
    ------
    EmptyIdentifierError
        If the line is empty once the trailing newline is removed.
    InvalidIdentifierError
        If the line has no digit characters.
    IdentifierTooLongError
        If more than *max_digits* digits remain after filtering.
    """
    line = text.rstrip("\r\n")
    if not line:
        raise EmptyIdentifierError("empty identifier")

    digits = parse_digits(line)
    if digits is None:
        raise InvalidIdentifierError(f"no digits in {line!r}")
    if len(digits) > max_digits:
        raise IdentifierTooLongError(len(digits), max_digits)
    return digits


def fill_random(
    buffer: MutableSequence[int],
    count: int,
    rng: np.random.Generator,
    limit: int = RANDOM_VALUE_LIMIT,
) -> None:
    """Overwrite ``buffer[:count]`` with uniform integers in ``[0, limit)``."""
    if count > len(buffer):
        raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")
    buffer[:count] = rng.integers(0, limit, size=count).tolist()
