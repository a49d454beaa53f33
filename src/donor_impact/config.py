"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from donor_impact.domain.impact import ImpactConstants

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    environment: str = _ENVIRONMENT
    impact_debug: bool = False
    minimum_donation_amount: float = Field(default=1.0, ge=0)

    # Almanac FY2024 conversion factors.
    meals_per_dollar: float = Field(default=0.833, gt=0)
    people_per_meal: float = Field(default=0.328, gt=0)
    food_rescue_per_dollar: float = Field(default=0.421, gt=0)
    co2_per_pound_food: float = Field(default=0.84, ge=0)
    water_per_pound_food: float = Field(default=45.2, ge=0)
    produce_percentage: float = Field(default=31.92, ge=0, le=100)
    dairy_percentage: float = Field(default=21.67, ge=0, le=100)
    protein_percentage: float = Field(default=18.33, ge=0, le=100)
    total_meals_provided: int = Field(default=10951888, gt=0)
    total_people_served: int = Field(default=60000, gt=0)

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def impact_constants(settings: Settings) -> ImpactConstants:
    """Build the immutable constants table the calculator consumes."""
    return ImpactConstants(
        meals_per_dollar=settings.meals_per_dollar,
        people_per_meal=settings.people_per_meal,
        food_rescue_per_dollar=settings.food_rescue_per_dollar,
        co2_per_pound_food=settings.co2_per_pound_food,
        water_per_pound_food=settings.water_per_pound_food,
        produce_percentage=settings.produce_percentage,
        dairy_percentage=settings.dairy_percentage,
        protein_percentage=settings.protein_percentage,
        total_meals_provided=settings.total_meals_provided,
        total_people_served=settings.total_people_served,
    )
