"""Target difficulty bounds."""

from __future__ import annotations

import math
from numbers import Real

from .errors import DifficultyOutOfRange, InvalidParameter

# 64 hex characters of a SHA-256 digest.
MAX_DIFFICULTY = 64


def validate_difficulty(value: object) -> int:
    """Return the difficulty as an int or raise before any work is done."""

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter("difficulty must be a number")
    if math.isnan(value):
        raise InvalidParameter("difficulty must be a number")
    if value < 0:
        raise DifficultyOutOfRange("difficulty cannot be negative")
    if value > MAX_DIFFICULTY:
        raise DifficultyOutOfRange(f"difficulty cannot exceed {MAX_DIFFICULTY}")
    if value != int(value):
        raise InvalidParameter("difficulty must be a whole number")
    return int(value)
