"""Domain models for donation impact."""

from dataclasses import asdict, dataclass, fields


class InvalidAmountError(ValueError):
    """Raised when a donation amount is negative, non-numeric, or non-finite."""


@dataclass(frozen=True)
class ImpactConstants:
    """Per-dollar conversion factors and food distribution shares."""

    meals_per_dollar: float = 0.833
    people_per_meal: float = 0.328
    food_rescue_per_dollar: float = 0.421
    co2_per_pound_food: float = 0.84
    water_per_pound_food: float = 45.2
    produce_percentage: float = 31.92
    dairy_percentage: float = 21.67
    protein_percentage: float = 18.33
    total_meals_provided: int = 10951888
    total_people_served: int = 60000

    @property
    def fresh_food_percentage(self) -> float:
        return (
            self.produce_percentage + self.dairy_percentage + self.protein_percentage
        )


@dataclass(frozen=True)
class ImpactMetrics:
    """Base impact derived from a donation amount."""

    meals_provided: int
    people_served: int
    people_percentage: str
    food_rescued: int
    co2_saved: int
    water_saved: int
    produce_percentage: float
    dairy_percentage: float
    protein_percentage: float
    fresh_food_percentage: float
    people_fed: str | None
    days_fed: str | None
    baby_elephants: str | None
    bison: str | None
    cars: str | None

    def to_payload(self) -> dict[str, object]:
        """Serialize to the camelCase shape the slideshow expects."""
        return {
            _camel_case(name): value
            for name, value in asdict(self).items()
            if value is not None
        }


@dataclass(frozen=True)
class EnrichedImpactMetrics(ImpactMetrics):
    """Impact metrics with narrative comparisons attached."""

    weight_comparison: str | None = None
    house_cats: str | None = None
    golden_retrievers: str | None = None
    grizzly_bears: str | None = None
    hippos: str | None = None
    school_buses: str | None = None
    small_jets: str | None = None

    @classmethod
    def from_base(
        cls, impact: ImpactMetrics, **overrides: object
    ) -> "EnrichedImpactMetrics":
        """Copy the base fields of `impact` and apply overrides."""
        values = {field.name: getattr(impact, field.name) for field in fields(impact)}
        values.update(overrides)
        return cls(**values)


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)
