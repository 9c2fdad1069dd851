from __future__ import annotations

import pytest

from nostr_pow.difficulty import MAX_DIFFICULTY, validate_difficulty
from nostr_pow.errors import DifficultyOutOfRange, InvalidParameter


def test_accepts_bounds() -> None:
    assert validate_difficulty(0) == 0
    assert validate_difficulty(MAX_DIFFICULTY) == 64


def test_rejects_out_of_range() -> None:
    with pytest.raises(DifficultyOutOfRange, match="negative"):
        validate_difficulty(-1)
    with pytest.raises(DifficultyOutOfRange, match="exceed 64"):
        validate_difficulty(65)
    with pytest.raises(DifficultyOutOfRange):
        validate_difficulty(float("inf"))


def test_rejects_non_numeric() -> None:
    for value in ("5", None, True, [5], float("nan")):
        with pytest.raises(InvalidParameter):
            validate_difficulty(value)


def test_normalizes_integral_floats() -> None:
    result = validate_difficulty(12.0)
    assert result == 12
    assert isinstance(result, int)
    with pytest.raises(InvalidParameter, match="whole number"):
        validate_difficulty(12.5)


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        validate_difficulty(100)
    with pytest.raises(ValueError):
        validate_difficulty("1")
