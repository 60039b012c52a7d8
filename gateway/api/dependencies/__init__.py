"""API dependencies."""

from gateway.api.dependencies.checkout import (
    get_checkout_request,
    get_checkout_service,
    get_registry,
)

__all__ = [
    "get_checkout_request",
    "get_checkout_service",
    "get_registry",
]
