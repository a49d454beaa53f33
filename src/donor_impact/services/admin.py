"""Admin service for donation reporting."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from donor_impact.domain.donations import DonationRecord
from donor_impact.services.donations import (
    DonationRepository,
    DonorRepository,
    serialize_donation,
    serialize_donor,
)
from donor_impact.services.impact import ImpactService

RECENT_DONATIONS_LIMIT = 20


@dataclass
class AdminService:
    """Service for admin dashboards."""

    donor_repository: DonorRepository
    donation_repository: DonationRepository
    impact_service: ImpactService

    def list_donors(self, limit: int = 50) -> list[dict[str, object]]:
        """Return donors with giving summaries."""
        summaries = []
        for donor in self.donor_repository.list_donors(limit):
            donations = self.donation_repository.list_donations_for_donor(donor)
            last = donations[0] if donations else None
            summaries.append(
                {
                    **serialize_donor(donor),
                    "donation_count": len(donations),
                    "lifetime_total": _total(donations),
                    "last_donation_at": last.timestamp.isoformat() if last else None,
                }
            )
        return summaries

    def get_donor_detail(self, donor_id: int) -> dict[str, object] | None:
        """Return recent donations and lifetime impact for a donor."""
        donor = self.donor_repository.get_by_id(donor_id)
        if donor is None:
            return None
        donations = self.donation_repository.list_donations_for_donor(donor)
        lifetime_total = _total(donations)
        return {
            "donor": serialize_donor(donor),
            "recent_donations": [
                serialize_donation(donation)
                for donation in donations[:RECENT_DONATIONS_LIMIT]
            ],
            "lifetime_total": lifetime_total,
            "lifetime_impact": self.impact_service.impact_for_total(
                lifetime_total
            ).to_payload(),
        }

    def summary(self, days: int = 30) -> dict[str, object]:
        """Return donation totals and combined impact for the last `days` days."""
        now = datetime.now(tz=UTC)
        start = now - timedelta(days=days)
        donations = self.donation_repository.list_donations(start, now)
        total = _total(donations)
        return {
            "days": days,
            "start": start.isoformat(),
            "end": now.isoformat(),
            "donation_count": len(donations),
            "total_amount": total,
            "average_amount": total / len(donations) if donations else 0.0,
            "impact": self.impact_service.impact_for_total(total).to_payload(),
        }


def _total(donations: list[DonationRecord]) -> float:
    return round(sum(donation.amount for donation in donations), 2)
