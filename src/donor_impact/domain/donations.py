"""Domain models for donors and donations."""

from dataclasses import dataclass
from datetime import datetime

from donor_impact.domain.impact import EnrichedImpactMetrics


@dataclass(frozen=True)
class DonorRecord:
    """Represents a donor stored in the database."""

    id: int
    email: str
    first_name: str | None
    last_name: str | None


@dataclass(frozen=True)
class DonationRecord:
    """A single logged donation."""

    id: int
    amount: float
    timestamp: datetime
    email: str | None
    donor_id: int | None


@dataclass(frozen=True)
class DonorImpact:
    """A donor's most recent gift with its impact."""

    donor: DonorRecord
    donation: DonationRecord
    impact: EnrichedImpactMetrics
