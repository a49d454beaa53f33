"""Supabase-backed donor repository."""

from dataclasses import dataclass

from supabase import Client

from donor_impact.domain.donations import DonorRecord
from donor_impact.services.donations import DonorRepository

_DONOR_COLUMNS = "id, email, first_name, last_name"


@dataclass
class SupabaseDonorRepository(DonorRepository):
    """Supabase implementation for donor lookups."""

    client: Client

    def get_by_id(self, donor_id: int) -> DonorRecord | None:
        """Return the donor with the given id, if present."""
        response = (
            self.client.table("donors")
            .select(_DONOR_COLUMNS)
            .eq("id", donor_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def get_by_email(self, email: str) -> DonorRecord | None:
        """Return the donor with the given email, ignoring case."""
        response = (
            self.client.table("donors")
            .select(_DONOR_COLUMNS)
            .ilike("email", escape_like(email))
            .execute()
        )
        # PostgREST also treats `*` as a wildcard, so confirm the exact match.
        wanted = email.casefold()
        for row in response.data or []:
            if str(row.get("email") or "").casefold() == wanted:
                return _parse_row(row)
        return None

    def list_donors(self, limit: int) -> list[DonorRecord]:
        """Return donors ordered by id."""
        response = (
            self.client.table("donors")
            .select(_DONOR_COLUMNS)
            .order("id", desc=False)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so `value` only matches itself."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _parse_row(row: dict[str, object]) -> DonorRecord:
    return DonorRecord(
        id=int(row["id"]),
        email=str(row.get("email") or ""),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
    )
