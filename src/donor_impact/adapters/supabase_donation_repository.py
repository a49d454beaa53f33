"""Supabase-backed donation repository."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from supabase import Client

from donor_impact.domain.donations import DonationRecord, DonorRecord
from donor_impact.services.donations import DonationRepository

_DONATION_COLUMNS = "id, amount, timestamp, email, donor_id"
# PostgREST caps each response at 1000 rows by default.
PAGE_SIZE = 1000


@dataclass
class SupabaseDonationRepository(DonationRepository):
    """Supabase implementation for donation persistence."""

    client: Client

    def create_donation(
        self,
        amount: float,
        timestamp: datetime,
        email: str | None,
        donor_id: int | None,
    ) -> DonationRecord:
        """Insert a donation row and return it."""
        response = (
            self.client.table("donations")
            .insert(
                {
                    "amount": amount,
                    "timestamp": timestamp.isoformat(),
                    "email": email,
                    "donor_id": donor_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create donation in Supabase")
        return _parse_row(response.data[0])

    def list_donations_for_donor(
        self, donor: DonorRecord, limit: int | None = None
    ) -> list[DonationRecord]:
        """Return donations linked to the donor by id or email, newest first."""

        def build_query() -> Any:
            query = self.client.table("donations").select(_DONATION_COLUMNS)
            if donor.email:
                # Logged donation emails are stored lowercased.
                query = query.or_(
                    f"donor_id.eq.{donor.id},email.eq.{donor.email.lower()}"
                )
            else:
                query = query.eq("donor_id", donor.id)
            return query.order("timestamp", desc=True)

        if limit is not None:
            response = build_query().limit(limit).execute()
            return [_parse_row(row) for row in response.data or []]
        return [_parse_row(row) for row in _fetch_all(build_query)]

    def list_donations(self, start: datetime, end: datetime) -> list[DonationRecord]:
        """Return donations in the time range."""
        rows = _fetch_all(
            lambda: self.client.table("donations")
            .select(_DONATION_COLUMNS)
            .gte("timestamp", start.isoformat())
            .lt("timestamp", end.isoformat())
            .order("timestamp", desc=False)
        )
        return [_parse_row(row) for row in rows]


def _fetch_all(build_query: Callable[[], Any]) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    offset = 0
    while True:
        response = build_query().range(offset, offset + PAGE_SIZE - 1).execute()
        page = response.data or []
        rows.extend(page)
        if len(page) < PAGE_SIZE:
            return rows
        offset += PAGE_SIZE


def _parse_row(row: dict[str, object]) -> DonationRecord:
    timestamp_raw = row.get("timestamp")
    timestamp = (
        datetime.fromisoformat(timestamp_raw)
        if isinstance(timestamp_raw, str) and timestamp_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    donor_id = row.get("donor_id")
    return DonationRecord(
        id=int(row["id"]),
        amount=float(row.get("amount") or 0.0),
        timestamp=timestamp,
        email=row.get("email"),
        donor_id=int(donor_id) if donor_id is not None else None,
    )
