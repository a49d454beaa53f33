"""Tests for threshold ladders."""

import math

import pytest

from donor_impact.domain.ladder import Rung, ThresholdLadder


def _ladder() -> ThresholdLadder[str]:
    return ThresholdLadder(
        [
            Rung(10, lambda value: f"small {value:g}"),
            Rung(100, lambda value: f"medium {value:g}"),
            Rung(math.inf, lambda value: f"large {value:g}"),
        ]
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "small 0"),
        (9.99, "small 9.99"),
        (10, "medium 10"),
        (99, "medium 99"),
        (100, "large 100"),
        (1e9, "large 1e+09"),
    ],
)
def test_first_exclusive_bound_wins(value: float, expected: str) -> None:
    assert _ladder()(value) == expected


def test_select_returns_matching_rung() -> None:
    ladder = _ladder()

    assert ladder.select(50) is ladder.rungs[1]


def test_nan_falls_through_to_terminal_rung() -> None:
    ladder = _ladder()

    assert ladder.select(math.nan) is ladder.rungs[-1]


def test_ladder_requires_unbounded_terminal_rung() -> None:
    with pytest.raises(ValueError, match="unbounded"):
        ThresholdLadder([Rung(10, str), Rung(20, str)])


def test_ladder_requires_ascending_bounds() -> None:
    with pytest.raises(ValueError, match="ascending"):
        ThresholdLadder([Rung(20, str), Rung(10, str), Rung(math.inf, str)])


def test_ladder_requires_rungs() -> None:
    with pytest.raises(ValueError):
        ThresholdLadder([])
