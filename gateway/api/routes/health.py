"""Health check endpoints."""

from fastapi import APIRouter, Depends, Request

from gateway.api.dependencies import get_registry
from gateway.api.schemas.health import HealthResponse, ReadyResponse
from gateway.payments.registry import ProcessorRegistry

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Liveness probe.

    Returns 200 if the service is running.
    """
    return HealthResponse(status="ok")


@router.get("/ready", response_model=ReadyResponse)
async def readiness_check(
    request: Request,
    registry: ProcessorRegistry = Depends(get_registry),
) -> ReadyResponse:
    """
    Readiness probe.

    Reports "degraded" when the configured default processor is not
    registered, since checkouts without providerId would fail.
    """
    default_provider = request.app.state.default_provider_id
    default_available = registry.initialized and default_provider in registry

    status = "ok" if default_available else "degraded"

    return ReadyResponse(
        status=status,
        providers=len(registry),
        default_provider=default_provider,
        default_available=default_available,
    )
