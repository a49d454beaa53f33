"""Impact service combining the calculator and narrative enrichment."""

import logging
from dataclasses import dataclass

from donor_impact.domain.impact import (
    EnrichedImpactMetrics,
    ImpactConstants,
    InvalidAmountError,
)
from donor_impact.services.calculator import compute_impact, validate_amount
from donor_impact.services.narrative import enrich

_logger = logging.getLogger(__name__)


@dataclass
class ImpactService:
    """Computes donor-facing impact for a donation amount."""

    constants: ImpactConstants
    minimum_amount: float = 1.0
    debug: bool = False

    def calculate(self, amount: object) -> EnrichedImpactMetrics:
        """Return enriched impact, rejecting amounts below the minimum gift."""
        value = validate_amount(amount)
        if value < self.minimum_amount:
            raise InvalidAmountError(
                f"Donation amount must be at least {self.minimum_amount}, got {value}"
            )
        return self.impact_for_total(value)

    def impact_for_total(self, amount: float) -> EnrichedImpactMetrics:
        """Return enriched impact for any total, such as lifetime giving."""
        impact = enrich(compute_impact(amount, self.constants))
        if self.debug:
            _logger.info(
                "Impact computed: amount=%s meals=%s food_rescued=%s",
                amount,
                impact.meals_provided,
                impact.food_rescued,
            )
        return impact

    def almanac(self) -> dict[str, object]:
        """Return the conversion constants in the shape the client reads."""
        constants = self.constants
        return {
            "mealsPerDollar": constants.meals_per_dollar,
            "peoplePerMeal": constants.people_per_meal,
            "foodRescuePerDollar": constants.food_rescue_per_dollar,
            "co2PerPoundFood": constants.co2_per_pound_food,
            "waterPerPoundFood": constants.water_per_pound_food,
            "foodDistribution": {
                "produce": constants.produce_percentage,
                "dairy": constants.dairy_percentage,
                "protein": constants.protein_percentage,
            },
            "totalMealsProvided": constants.total_meals_provided,
            "totalPeopleServed": constants.total_people_served,
        }
