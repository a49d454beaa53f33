"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from donor_impact.config import Settings, impact_constants
from donor_impact.containers import AppContainer
from donor_impact.domain.donations import DonationRecord, DonorRecord
from donor_impact.domain.impact import ImpactConstants
from donor_impact.services.admin import AdminService
from donor_impact.services.donations import (
    DonationRepository,
    DonationService,
    DonorRepository,
)
from donor_impact.services.impact import ImpactService

# Round numbers that make expected metrics easy to read in assertions.
SIMPLE_CONSTANTS = ImpactConstants(
    meals_per_dollar=3,
    people_per_meal=0.25,
    food_rescue_per_dollar=2,
    co2_per_pound_food=1.5,
    water_per_pound_food=50,
)


@dataclass
class InMemoryDonorRepository(DonorRepository):
    """In-memory donor repository for tests."""

    donors: dict[int, DonorRecord] = field(default_factory=dict)

    def add(
        self, email: str, first_name: str | None = None, last_name: str | None = None
    ) -> DonorRecord:
        donor = DonorRecord(
            id=len(self.donors) + 1,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        self.donors[donor.id] = donor
        return donor

    def get_by_id(self, donor_id: int) -> DonorRecord | None:
        return self.donors.get(donor_id)

    def get_by_email(self, email: str) -> DonorRecord | None:
        for donor in self.donors.values():
            if donor.email.lower() == email.lower():
                return donor
        return None

    def list_donors(self, limit: int) -> list[DonorRecord]:
        return sorted(self.donors.values(), key=lambda donor: donor.id)[:limit]


@dataclass
class InMemoryDonationRepository(DonationRepository):
    """In-memory donation repository for tests."""

    donations: list[DonationRecord] = field(default_factory=list)

    def create_donation(
        self,
        amount: float,
        timestamp: datetime,
        email: str | None,
        donor_id: int | None,
    ) -> DonationRecord:
        donation = DonationRecord(
            id=len(self.donations) + 1,
            amount=amount,
            timestamp=timestamp,
            email=email,
            donor_id=donor_id,
        )
        self.donations.append(donation)
        return donation

    def list_donations_for_donor(
        self, donor: DonorRecord, limit: int | None = None
    ) -> list[DonationRecord]:
        email = donor.email.lower()
        matches = [
            donation
            for donation in self.donations
            if donation.donor_id == donor.id
            or (donation.email and donation.email == email)
        ]
        return sorted(matches, key=lambda donation: donation.timestamp, reverse=True)[
            :limit
        ]

    def list_donations(self, start: datetime, end: datetime) -> list[DonationRecord]:
        return [
            donation
            for donation in self.donations
            if start <= donation.timestamp < end
        ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
    )


@pytest.fixture
def impact_service(settings: Settings) -> ImpactService:
    return ImpactService(
        constants=impact_constants(settings),
        minimum_amount=settings.minimum_donation_amount,
    )


@pytest.fixture
def donor_repository() -> InMemoryDonorRepository:
    return InMemoryDonorRepository()


@pytest.fixture
def donation_repository() -> InMemoryDonationRepository:
    return InMemoryDonationRepository()


@pytest.fixture
def container(
    settings: Settings,
    impact_service: ImpactService,
    donor_repository: InMemoryDonorRepository,
    donation_repository: InMemoryDonationRepository,
) -> AppContainer:
    donation_service = DonationService(
        donor_repository=donor_repository,
        donation_repository=donation_repository,
        impact_service=impact_service,
    )
    admin_service = AdminService(
        donor_repository=donor_repository,
        donation_repository=donation_repository,
        impact_service=impact_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        impact_service=impact_service,
        donation_service=donation_service,
        admin_service=admin_service,
        close_resources=close_resources,
    )
