"""PayPal payment processor."""

from gateway.payments.providers.paypal.provider import PaypalPaymentProcessor

__all__ = [
    "PaypalPaymentProcessor",
]
