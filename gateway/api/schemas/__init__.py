"""API schemas."""

from gateway.api.schemas.checkout import (
    CheckoutErrorCode,
    CheckoutRequest,
    ErrorResponse,
    ProviderInfo,
)
from gateway.api.schemas.health import HealthResponse, ReadyResponse

__all__ = [
    "CheckoutErrorCode",
    "CheckoutRequest",
    "ErrorResponse",
    "HealthResponse",
    "ProviderInfo",
    "ReadyResponse",
]
