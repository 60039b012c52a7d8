"""Base payment processor interface."""

import threading
import time
from abc import ABC, abstractmethod

from gateway.payments.schemas import PaymentRequest, PaymentResult


class PaymentProcessor(ABC):
    """Abstract base class for payment processors.

    All processors (Stripe, PayPal, etc.) must implement this interface.
    """

    @abstractmethod
    def id(self) -> str:
        """Stable short identifier, unique across registered processors."""

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable display name."""

    @abstractmethod
    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        """Charge the request.

        Gateway-level declines must be returned as PaymentResult with
        success=False, not raised.

        Args:
            request: Checkout request to charge

        Returns:
            Normalized payment result
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id()!r})"


_sequence_lock = threading.Lock()
_last_sequence = 0


def next_transaction_sequence() -> int:
    """Return a process-wide increasing number based on epoch milliseconds.

    Calls landing in the same millisecond get last + 1.
    """
    global _last_sequence

    now_ms = time.time_ns() // 1_000_000
    with _sequence_lock:
        _last_sequence = max(now_ms, _last_sequence + 1)
        return _last_sequence


def generate_transaction_id(provider_id: str) -> str:
    """Build a simulated transaction id: tx-<provider_id>_<sequence>."""
    return f"tx-{provider_id}_{next_transaction_sequence()}"
