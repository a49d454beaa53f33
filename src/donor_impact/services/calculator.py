"""Impact calculator: donation amount to base impact metrics."""

import math
from decimal import Decimal
from numbers import Real

from donor_impact.domain.impact import (
    ImpactConstants,
    ImpactMetrics,
    InvalidAmountError,
)
from donor_impact.domain.ladder import Rung, ThresholdLadder

MEALS_PER_FAMILY_DAY = 12
MEALS_PER_FAMILY_WEEK = 84

BABY_ELEPHANT_LBS = 200
BISON_LBS = 2000
CAR_LBS = 4000

PEOPLE_FED_LADDER: ThresholdLadder[str] = ThresholdLadder(
    [
        Rung(MEALS_PER_FAMILY_DAY, lambda _meals: "a person"),
        Rung(math.inf, lambda _meals: "a family of 4"),
    ]
)

DAYS_FED_LADDER: ThresholdLadder[str] = ThresholdLadder(
    [
        Rung(MEALS_PER_FAMILY_DAY, lambda _meals: "a day"),
        Rung(
            MEALS_PER_FAMILY_WEEK,
            lambda meals: f"{math.floor(meals / MEALS_PER_FAMILY_DAY)} days",
        ),
        Rung(
            math.inf,
            lambda meals: f"{math.floor(meals / MEALS_PER_FAMILY_WEEK)} weeks",
        ),
    ]
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def validate_amount(amount: object) -> float:
    """Return `amount` as a float or raise InvalidAmountError."""
    if isinstance(amount, bool) or not isinstance(amount, Real | Decimal):
        raise InvalidAmountError(f"Donation amount must be a number, got {amount!r}")
    value = float(amount)
    if not math.isfinite(value):
        raise InvalidAmountError(f"Donation amount must be finite, got {amount!r}")
    if value < 0:
        raise InvalidAmountError(
            f"Donation amount must not be negative, got {amount!r}"
        )
    return value


def compute_impact(amount: object, constants: ImpactConstants) -> ImpactMetrics:
    """Derive base impact metrics for a donation amount."""
    value = validate_amount(amount)
    meals = value * constants.meals_per_dollar
    people = meals * constants.people_per_meal
    pounds = value * constants.food_rescue_per_dollar

    meals_provided = round_half_up(meals)
    return ImpactMetrics(
        meals_provided=meals_provided,
        people_served=round_half_up(people),
        people_percentage=f"{people / constants.total_people_served * 100:.2f}",
        food_rescued=round_half_up(pounds),
        co2_saved=round_half_up(pounds * constants.co2_per_pound_food),
        water_saved=round_half_up(pounds * constants.water_per_pound_food),
        produce_percentage=constants.produce_percentage,
        dairy_percentage=constants.dairy_percentage,
        protein_percentage=constants.protein_percentage,
        fresh_food_percentage=constants.fresh_food_percentage,
        people_fed=PEOPLE_FED_LADDER(meals_provided),
        days_fed=DAYS_FED_LADDER(meals_provided),
        baby_elephants=f"{pounds / BABY_ELEPHANT_LBS:.1f}",
        bison=f"{pounds / BISON_LBS:.1f}",
        cars=f"{pounds / CAR_LBS:.1f}",
    )
