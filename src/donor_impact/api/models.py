"""Request payloads for the donation API."""

from datetime import datetime

from pydantic import BaseModel, Field


class CalculateImpactRequest(BaseModel):
    """Body of a calculate-impact request."""

    amount: float = Field(strict=True)


class LogDonationRequest(BaseModel):
    """Body of a log-donation request."""

    amount: float = Field(ge=0, allow_inf_nan=False)
    timestamp: datetime | None = None
    email: str | None = None
