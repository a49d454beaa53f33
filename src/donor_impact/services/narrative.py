"""Narrative enrichment: attach human-readable comparisons to impact metrics.

Every phrase is chosen from a threshold ladder so each tier can be checked on
its own. Enrichment only reads the numeric fields of the base record, so
running it on an already enriched record yields the same result.
"""

import math

from donor_impact.domain.impact import EnrichedImpactMetrics, ImpactMetrics
from donor_impact.domain.ladder import Rung, ThresholdLadder
from donor_impact.services.calculator import round_half_up

MEALS_PER_DAY = 3
POUNDS_PER_BISON_UNIT = 100


def _whole(unit_lbs: float, label: str, each: str | None = None):
    def render(lbs: float) -> str:
        text = f"{round_half_up(lbs / unit_lbs)} {label}"
        return f"{text} (~{each} lbs each)" if each else text

    return render


def _decimal(unit_lbs: float, label: str, places: int, each: str | None = None):
    def render(lbs: float) -> str:
        text = f"{lbs / unit_lbs:.{places}f} {label}"
        return f"{text} (~{each} lbs each)" if each else text

    return render


WEIGHT_LADDER: ThresholdLadder[str] = ThresholdLadder(
    [
        Rung(20, _whole(10, "large house cats", "10")),
        Rung(200, _whole(70, "Golden Retrievers", "70")),
        Rung(1000, _whole(200, "baby elephants", "200")),
        Rung(3000, _whole(700, "grizzly bears", "700")),
        Rung(5000, _whole(3000, "hippos", "3,000")),
        Rung(10000, _decimal(4000, "cars", 1, "4,000")),
        Rung(30000, _decimal(24000, "school buses", 1, "24,000")),
        Rung(math.inf, _decimal(90000, "small jets", 2, "90,000")),
    ]
)

# Comparisons that are always filled in, whichever tier the weight lands in.
ALL_COMPARISONS = {
    "house_cats": _whole(10, "large house cats"),
    "golden_retrievers": _whole(70, "Golden Retrievers"),
    "baby_elephants": _whole(200, "baby elephants"),
    "grizzly_bears": _whole(700, "grizzly bears"),
    "hippos": _whole(3000, "hippos"),
    "cars": _decimal(4000, "cars", 1),
    "school_buses": _decimal(24000, "school buses", 1),
    "small_jets": _decimal(90000, "small jets", 2),
}


def _bison_count(lbs: float) -> int:
    return round_half_up(lbs / POUNDS_PER_BISON_UNIT)


BISON_LADDER: ThresholdLadder[str] = ThresholdLadder(
    [
        Rung(100, lambda _lbs: "nearly one bison"),
        Rung(500, lambda lbs: f"{_bison_count(lbs)} bison"),
        Rung(
            1000,
            lambda lbs: f"a group of {_bison_count(lbs)} bison roaming the plains",
        ),
        Rung(math.inf, lambda lbs: f"a majestic herd of {_bison_count(lbs)} bison"),
    ]
)

PEOPLE_FED_LADDER: ThresholdLadder[str] = ThresholdLadder(
    [
        Rung(10, lambda people: f"a family of {people:.0f}"),
        Rung(
            50,
            lambda people: (
                f"everyone at a small community gathering ({people:.0f} people)"
            ),
        ),
        Rung(
            200,
            lambda people: (
                f"an entire school classroom for a month ({people:.0f} students)"
            ),
        ),
        Rung(
            math.inf,
            lambda people: f"everyone in a small concert venue ({people:.0f} people)",
        ),
    ]
)

DAYS_FED_LADDER: ThresholdLadder[str] = ThresholdLadder(
    [
        Rung(1, lambda _days: "a nutritious meal"),
        Rung(2, lambda _days: "a full day of meals"),
        Rung(7, lambda days: f"{days:.0f} days of meals"),
        Rung(30, lambda days: f"{round_half_up(days / 7)} weeks of meals"),
        Rung(math.inf, lambda _days: "over a month of meals"),
    ]
)


def days_of_food(meals_provided: int, people_served: int) -> int:
    """Whole days the meals would feed everyone served, at three meals a day."""
    return round_half_up(meals_provided / (people_served * MEALS_PER_DAY))


def enrich(impact: ImpactMetrics) -> EnrichedImpactMetrics:
    """Return a new record with narrative comparisons added."""
    weight: dict[str, str | None] = {
        "weight_comparison": None,
        "bison": None,
        **dict.fromkeys(ALL_COMPARISONS),
    }
    if impact.food_rescued > 0:
        lbs = impact.food_rescued
        weight["weight_comparison"] = WEIGHT_LADDER(lbs)
        weight["bison"] = BISON_LADDER(lbs)
        for name, render in ALL_COMPARISONS.items():
            weight[name] = render(lbs)

    people: dict[str, str] = {}
    if impact.meals_provided > 0:
        # A small gift can round to zero people while still providing a meal.
        served = max(impact.people_served, 1)
        people["people_fed"] = PEOPLE_FED_LADDER(served)
        people["days_fed"] = DAYS_FED_LADDER(
            days_of_food(impact.meals_provided, served)
        )

    return EnrichedImpactMetrics.from_base(impact, **weight, **people)
