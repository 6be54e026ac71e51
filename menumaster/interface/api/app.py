"""FastAPI application."""

import logging

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from menumaster.config import Settings
from menumaster.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    PaymentProviderError,
    StoreUnavailableError,
)
from menumaster.interface.api.routes import access, health, invitations, payment
from menumaster.util.di.container import create_container, setup_di
from menumaster.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    """Map domain errors that escape use cases to HTTP responses."""

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable(request: Request, exc: StoreUnavailableError):
        logger.error(
            "Store unavailable on %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Service temporarily unavailable"},
            headers={"Retry-After": "5"},
        )

    @app.exception_handler(PaymentProviderError)
    async def payment_provider_error(request: Request, exc: PaymentProviderError):
        logger.warning("Payment provider error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Payment provider error"},
        )

    @app.exception_handler(NotAuthorizedError)
    async def not_authorized(request: Request, exc: NotAuthorizedError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Admin access required"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": f"{exc.resource} not found"},
        )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a mocked container.

    Args:
        container: DI container; the production container is built if omitted
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="MenuMaster Access API",
        description="Payment gate and restaurant invitations for MenuMaster",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    _register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(payment.router)
    app_instance.include_router(access.router)
    app_instance.include_router(invitations.router)

    return app_instance
