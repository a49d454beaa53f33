"""Threshold ladders for magnitude-based phrasing."""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rung(Generic[T]):
    """A single step of a ladder: values below `upper_bound` render here."""

    upper_bound: float
    render: Callable[[float], T]


@dataclass(frozen=True)
class ThresholdLadder(Generic[T]):
    """Ordered rungs scanned bottom-up; the first exclusive bound that fits wins."""

    rungs: tuple[Rung[T], ...]

    def __init__(self, rungs: Sequence[Rung[T]]) -> None:
        if not rungs:
            raise ValueError("A ladder needs at least one rung")
        bounds = [rung.upper_bound for rung in rungs]
        if bounds != sorted(bounds):
            raise ValueError("Ladder bounds must be ascending")
        if not math.isinf(bounds[-1]):
            raise ValueError("The last rung must be unbounded")
        object.__setattr__(self, "rungs", tuple(rungs))

    def select(self, value: float) -> Rung[T]:
        """Return the rung that applies to `value`."""
        for rung in self.rungs:
            if value < rung.upper_bound:
                return rung
        return self.rungs[-1]

    def __call__(self, value: float) -> T:
        return self.select(value).render(value)
