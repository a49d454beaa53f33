"""Tests for admin reporting."""

from datetime import UTC, datetime, timedelta

from donor_impact.services.admin import AdminService
from donor_impact.services.impact import ImpactService
from tests.conftest import (
    SIMPLE_CONSTANTS,
    InMemoryDonationRepository,
    InMemoryDonorRepository,
)


def _service() -> tuple[
    AdminService, InMemoryDonorRepository, InMemoryDonationRepository
]:
    donors = InMemoryDonorRepository()
    donations = InMemoryDonationRepository()
    service = AdminService(
        donor_repository=donors,
        donation_repository=donations,
        impact_service=ImpactService(SIMPLE_CONSTANTS),
    )
    return service, donors, donations


def test_list_donors_summarizes_giving() -> None:
    service, donors, donations = _service()
    anne = donors.add("anne@example.com", "Anne", "Hill")
    donors.add("quiet@example.com")
    now = datetime.now(tz=UTC)
    donations.create_donation(59.29, now - timedelta(days=90), anne.email, anne.id)
    donations.create_donation(59.29, now, anne.email, anne.id)

    summaries = service.list_donors(limit=10)

    assert len(summaries) == 2
    assert summaries[0]["email"] == "anne@example.com"
    assert summaries[0]["donation_count"] == 2
    assert summaries[0]["lifetime_total"] == 118.58
    assert summaries[0]["last_donation_at"] == now.isoformat()
    assert summaries[1]["donation_count"] == 0
    assert summaries[1]["last_donation_at"] is None


def test_get_donor_detail_includes_lifetime_impact() -> None:
    service, donors, donations = _service()
    donor = donors.add("jsmith@example.com", "John", "Smith")
    now = datetime.now(tz=UTC)
    donations.create_donation(60, now - timedelta(days=1), donor.email, donor.id)
    donations.create_donation(40, now, donor.email, donor.id)

    detail = service.get_donor_detail(donor.id)

    assert detail is not None
    assert detail["lifetime_total"] == 100
    assert [entry["amount"] for entry in detail["recent_donations"]] == [40, 60]
    assert detail["lifetime_impact"]["mealsProvided"] == 300
    assert detail["lifetime_impact"]["babyElephants"] == "1 baby elephants"


def test_get_donor_detail_unknown_donor() -> None:
    service, _, _ = _service()

    assert service.get_donor_detail(404) is None


def test_summary_covers_recent_window() -> None:
    service, _, donations = _service()
    now = datetime.now(tz=UTC)
    donations.create_donation(30, now - timedelta(days=2), None, None)
    donations.create_donation(70, now - timedelta(hours=1), None, None)
    donations.create_donation(500, now - timedelta(days=45), None, None)

    summary = service.summary(days=30)

    assert summary["donation_count"] == 2
    assert summary["total_amount"] == 100
    assert summary["average_amount"] == 50
    assert summary["impact"]["foodRescued"] == 200


def test_summary_without_donations() -> None:
    service, _, _ = _service()

    summary = service.summary(days=7)

    assert summary["donation_count"] == 0
    assert summary["average_amount"] == 0.0
    assert "weightComparison" not in summary["impact"]


def test_lifetime_totals_include_every_donation() -> None:
    service, donors, donations = _service()
    donor = donors.add("heavy@example.com")
    start = datetime(2020, 1, 1, tzinfo=UTC)
    for day in range(1005):
        donations.create_donation(
            1.0, start + timedelta(days=day), donor.email, donor.id
        )

    summary = service.list_donors(limit=1)[0]
    detail = service.get_donor_detail(donor.id)

    assert summary["donation_count"] == 1005
    assert summary["lifetime_total"] == 1005
    assert detail is not None
    assert detail["lifetime_total"] == 1005
    assert len(detail["recent_donations"]) == 20
