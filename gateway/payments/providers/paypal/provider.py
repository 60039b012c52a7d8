"""Simulated PayPal payment processor."""

from gateway.core.logging import get_logger
from gateway.payments.providers.base import PaymentProcessor, generate_transaction_id
from gateway.payments.schemas import PaymentRequest, PaymentResult

logger = get_logger(__name__)


class PaypalPaymentProcessor(PaymentProcessor):
    """PayPal stand-in that always authorizes."""

    def id(self) -> str:
        return "paypal"

    def get_name(self) -> str:
        return "Paypal (Simulated)"

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        transaction_id = generate_transaction_id(self.id())
        logger.debug(
            "Paypal charge simulated: order_id=%s, amount=%s %s, tx=%s",
            request.order_id,
            request.amount,
            request.currency,
            transaction_id,
        )
        return PaymentResult(
            success=True,
            transaction_id=transaction_id,
            message="Paypal Payment processed successfully",
        )
