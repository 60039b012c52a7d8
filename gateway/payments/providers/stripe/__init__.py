"""Stripe payment processor."""

from gateway.payments.providers.stripe.provider import StripePaymentProcessor

__all__ = [
    "StripePaymentProcessor",
]
