"""Payment processing module."""

from gateway.payments.providers import discover_processors
from gateway.payments.providers.base import PaymentProcessor
from gateway.payments.registry import ProcessorRegistry
from gateway.payments.schemas import PaymentRequest, PaymentResult

__all__ = [
    "PaymentProcessor",
    "PaymentRequest",
    "PaymentResult",
    "ProcessorRegistry",
    "discover_processors",
]
