"""Donation logging and donor lookup."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from donor_impact.domain.donations import DonationRecord, DonorImpact, DonorRecord
from donor_impact.services.calculator import validate_amount
from donor_impact.services.impact import ImpactService

_logger = logging.getLogger(__name__)


class DonorRepository(Protocol):
    """Persistence interface for donors."""

    def get_by_id(self, donor_id: int) -> DonorRecord | None:
        """Return the donor with the given id, if present."""

    def get_by_email(self, email: str) -> DonorRecord | None:
        """Return the donor with the given email, if present."""

    def list_donors(self, limit: int) -> list[DonorRecord]:
        """Return donors ordered by id."""


class DonationRepository(Protocol):
    """Persistence interface for donations."""

    def create_donation(
        self,
        amount: float,
        timestamp: datetime,
        email: str | None,
        donor_id: int | None,
    ) -> DonationRecord:
        """Create and return a donation row."""

    def list_donations_for_donor(
        self, donor: DonorRecord, limit: int | None = None
    ) -> list[DonationRecord]:
        """Return a donor's donations, newest first; all when `limit` is None."""

    def list_donations(self, start: datetime, end: datetime) -> list[DonationRecord]:
        """Return donations within a time range."""


@dataclass
class DonationService:
    """Application service for donation logging and donor impact lookups."""

    donor_repository: DonorRepository
    donation_repository: DonationRepository
    impact_service: ImpactService

    def log_donation(
        self,
        amount: object,
        timestamp: datetime | None = None,
        email: str | None = None,
    ) -> DonationRecord:
        """Persist a donation, linking it to a known donor by email."""
        value = validate_amount(amount)
        cleaned_email = email.strip().lower() if email else None
        donor = (
            self.donor_repository.get_by_email(cleaned_email) if cleaned_email else None
        )
        donation = self.donation_repository.create_donation(
            amount=value,
            timestamp=timestamp or datetime.now(tz=UTC),
            email=cleaned_email,
            donor_id=donor.id if donor else None,
        )
        _logger.info(
            "Donation logged: id=%s amount=%s donor_id=%s",
            donation.id,
            donation.amount,
            donation.donor_id,
        )
        return donation

    def find_donor(self, identifier: str) -> DonorRecord | None:
        """Resolve a donor by numeric id or by email."""
        cleaned = identifier.strip()
        if not cleaned:
            return None
        if cleaned.isdigit():
            return self.donor_repository.get_by_id(int(cleaned))
        return self.donor_repository.get_by_email(cleaned.lower())

    def get_donor_impact(self, identifier: str) -> DonorImpact | None:
        """Return the impact of the donor's most recent donation."""
        donor = self.find_donor(identifier)
        if donor is None:
            return None
        donations = self.donation_repository.list_donations_for_donor(donor, limit=1)
        if not donations:
            _logger.info("Donor has no donations: donor_id=%s", donor.id)
            return None
        latest = donations[0]
        return DonorImpact(
            donor=donor,
            donation=latest,
            impact=self.impact_service.impact_for_total(latest.amount),
        )


def serialize_donor(donor: DonorRecord) -> dict[str, object]:
    """Serialize a donor row for JSON responses."""
    return {
        "id": donor.id,
        "email": donor.email,
        "first_name": donor.first_name,
        "last_name": donor.last_name,
    }


def serialize_donation(donation: DonationRecord) -> dict[str, object]:
    """Serialize a donation row for JSON responses."""
    return {
        "id": donation.id,
        "amount": donation.amount,
        "timestamp": donation.timestamp.isoformat(),
        "email": donation.email,
        "donor_id": donation.donor_id,
    }
