"""Health check schemas."""

from pydantic import BaseModel

from gateway.core.config import settings


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str = settings.app_name


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str
    providers: int
    default_provider: str
    default_available: bool
    service: str = settings.app_name
