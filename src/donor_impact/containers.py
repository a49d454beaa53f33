"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from donor_impact.adapters.supabase_donation_repository import (
    SupabaseDonationRepository,
)
from donor_impact.adapters.supabase_donor_repository import SupabaseDonorRepository
from donor_impact.config import Settings, impact_constants
from donor_impact.services.admin import AdminService
from donor_impact.services.donations import DonationService
from donor_impact.services.impact import ImpactService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    impact_service: ImpactService
    donation_service: DonationService
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    donor_repository = SupabaseDonorRepository(supabase_client)
    donation_repository = SupabaseDonationRepository(supabase_client)
    impact_service = ImpactService(
        constants=impact_constants(resolved_settings),
        minimum_amount=resolved_settings.minimum_donation_amount,
        debug=resolved_settings.impact_debug,
    )
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
        settings=resolved_settings,
        impact_service=impact_service,
        donation_service=donation_service,
        admin_service=admin_service,
        close_resources=close_resources,
    )
