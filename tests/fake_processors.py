"""Processors used by tests to exercise discovery and dispatch."""

from gateway.payments.providers.base import PaymentProcessor, generate_transaction_id
from gateway.payments.schemas import PaymentRequest, PaymentResult


class AmexPaymentProcessor(PaymentProcessor):
    """Extra processor loaded through configuration."""

    def id(self) -> str:
        return "amex"

    def get_name(self) -> str:
        return "Amex (test)"

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        return PaymentResult(
            success=True,
            transaction_id=generate_transaction_id(self.id()),
            message="Amex Payment processed successfully",
        )


class ShadowStripeProcessor(PaymentProcessor):
    """Reuses the stripe id to check first-registration-wins."""

    def id(self) -> str:
        return "stripe"

    def get_name(self) -> str:
        return "Stripe shadow"

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        return PaymentResult(success=False, transaction_id="shadow", message="shadow")


class DecliningProcessor(PaymentProcessor):
    """Reports a decline through the result, not an exception."""

    def id(self) -> str:
        return "decline"

    def get_name(self) -> str:
        return "Always declines"

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        return PaymentResult(
            success=False,
            transaction_id=generate_transaction_id(self.id()),
            message=f"Card declined for order {request.order_id}",
        )


class NotAProcessor:
    """Class that does not implement PaymentProcessor."""
