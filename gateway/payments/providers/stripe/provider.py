"""Simulated Stripe payment processor."""

from gateway.core.logging import get_logger
from gateway.payments.providers.base import PaymentProcessor, generate_transaction_id
from gateway.payments.schemas import PaymentRequest, PaymentResult

logger = get_logger(__name__)


class StripePaymentProcessor(PaymentProcessor):
    """Stripe stand-in that always authorizes.

    A real integration would call the Stripe API here and map declines
    to PaymentResult(success=False).
    """

    def id(self) -> str:
        return "stripe"

    def get_name(self) -> str:
        return "Stripe (simulated)"

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        transaction_id = generate_transaction_id(self.id())
        logger.debug(
            "Stripe charge simulated: order_id=%s, amount=%s %s, tx=%s",
            request.order_id,
            request.amount,
            request.currency,
            transaction_id,
        )
        return PaymentResult(
            success=True,
            transaction_id=transaction_id,
            message="Stripe Payment processed successfully",
        )
