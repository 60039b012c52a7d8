"""Business logic services."""

from gateway.services.checkout_service import CheckoutService

__all__ = [
    "CheckoutService",
]
