"""API module."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gateway import __version__
from gateway.api.middleware.rate_limit import RateLimitMiddleware
from gateway.api.routes import health, payments
from gateway.core.config import settings
from gateway.core.logging import get_logger
from gateway.payments.registry import ProcessorRegistry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the processor registry once before serving requests."""
    registry: ProcessorRegistry = app.state.registry
    if not registry.initialized:
        registry.initialize(extra_paths=settings.payment_extra_providers)

    if app.state.default_provider_id not in registry:
        logger.warning(
            "Default payment provider %r is not registered; checkouts without providerId will fail",
            app.state.default_provider_id,
        )

    yield


def create_api(
    registry: ProcessorRegistry | None = None,
    default_provider_id: str | None = None,
) -> FastAPI:
    """Create FastAPI application for the checkout gateway.

    Args:
        registry: Pre-built registry; a new one is discovered at startup if omitted
        default_provider_id: Override for settings.payment_default_provider
    """
    app = FastAPI(
        title="Checkout Gateway API",
        description="Payment provider registry and checkout dispatch",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.registry = registry if registry is not None else ProcessorRegistry()
    app.state.default_provider_id = default_provider_id or settings.payment_default_provider

    if settings.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            calls=settings.rate_limit_calls,
            period=settings.rate_limit_period,
            prefix=settings.api_prefix,
        )

    # Include routers
    app.include_router(health.router)
    app.include_router(payments.router, prefix=settings.api_prefix)

    return app


__all__ = ["create_api"]
