"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from donor_impact.api.admin import router as admin_router
from donor_impact.api.models import CalculateImpactRequest, LogDonationRequest
from donor_impact.app_logging import configure_logging
from donor_impact.containers import AppContainer
from donor_impact.domain.impact import InvalidAmountError
from donor_impact.services.donations import serialize_donation, serialize_donor

CALCULATE_IMPACT_PATH = "/api/calculate-impact"
LOG_DONATION_PATH = "/api/log-donation"

_INVALID_AMOUNT = "Invalid donation amount"
_INVALID_DONATION = "Invalid donation data"
_VALIDATION_MESSAGES = {
    CALCULATE_IMPACT_PATH: _INVALID_AMOUNT,
    LOG_DONATION_PATH: _INVALID_DONATION,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Donor impact API starting (environment=%s)",
            app.state.container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _VALIDATION_MESSAGES.get(request.url.path)
        if message is None:
            return await request_validation_exception_handler(request, exc)
        logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(InvalidAmountError)
    async def invalid_amount(request: Request, exc: InvalidAmountError) -> JSONResponse:
        logger.info("Invalid amount on %s: %s", request.url.path, exc)
        message = _VALIDATION_MESSAGES.get(request.url.path, _INVALID_AMOUNT)
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(CALCULATE_IMPACT_PATH)
    async def calculate_impact(
        body: CalculateImpactRequest, request: Request
    ) -> dict[str, object]:
        """Calculate enriched impact metrics for a donation amount."""
        state_container: AppContainer = request.app.state.container
        impact = state_container.impact_service.calculate(body.amount)
        return {"impact": impact.to_payload()}

    @app.post(LOG_DONATION_PATH, response_model=None)
    async def log_donation(
        body: LogDonationRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Persist a donation made through the impact flow."""
        state_container: AppContainer = request.app.state.container
        try:
            donation = state_container.donation_service.log_donation(
                amount=body.amount,
                timestamp=body.timestamp,
                email=body.email,
            )
        except InvalidAmountError:
            raise
        except Exception:
            logger.exception("Failed to log donation")
            return _error(status.HTTP_400_BAD_REQUEST, _INVALID_DONATION)
        return {"donation": serialize_donation(donation)}

    @app.get("/api/almanac-data")
    async def almanac_data(request: Request) -> dict[str, object]:
        """Return the conversion constants behind the impact numbers."""
        state_container: AppContainer = request.app.state.container
        return {"data": state_container.impact_service.almanac()}

    @app.get("/api/donor/{identifier}", response_model=None)
    async def donor_impact(
        identifier: str, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Return a returning donor's latest donation and its impact."""
        state_container: AppContainer = request.app.state.container
        result = state_container.donation_service.get_donor_impact(identifier)
        if result is None:
            return _error(status.HTTP_404_NOT_FOUND, "Donor not found")
        return {
            "donor": serialize_donor(result.donor),
            "donation": serialize_donation(result.donation),
            "impact": result.impact.to_payload(),
        }

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
