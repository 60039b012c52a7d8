"""Checkout service: provider selection and dispatch."""

from gateway.core.exceptions import ProviderNotFoundError
from gateway.core.logging import get_logger
from gateway.payments.registry import ProcessorRegistry
from gateway.payments.schemas import PaymentRequest, PaymentResult

logger = get_logger(__name__)


class CheckoutService:
    """Service for routing checkouts to payment processors."""

    def __init__(self, registry: ProcessorRegistry, default_provider_id: str) -> None:
        self.registry = registry
        self.default_provider_id = default_provider_id

    def resolve_provider_id(self, selected_provider_id: str | None) -> str:
        """Explicit non-empty selection wins, otherwise the default."""
        if selected_provider_id:
            return selected_provider_id
        return self.default_provider_id

    def checkout(
        self,
        request: PaymentRequest,
        selected_provider_id: str | None = None,
    ) -> PaymentResult:
        """Charge request with the selected or default processor.

        Args:
            request: Checkout request
            selected_provider_id: Processor id chosen by the caller, if any

        Returns:
            Result from the processor, unchanged

        Raises:
            ProviderNotFoundError: If the resolved id is not registered
        """
        provider_id = self.resolve_provider_id(selected_provider_id)

        processor = self.registry.get_processor_by_id(provider_id)
        if processor is None:
            logger.warning(
                "Checkout rejected: order_id=%s, provider_id=%s not registered",
                request.order_id,
                provider_id,
            )
            raise ProviderNotFoundError(
                resolved_id=provider_id,
                requested_id=selected_provider_id,
            )

        logger.info(
            "Checkout dispatched: order_id=%s, provider_id=%s",
            request.order_id,
            provider_id,
        )
        return processor.process_payment(request)
