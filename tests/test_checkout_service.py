"""Checkout provider selection and dispatch."""

import pytest
from fake_processors import DecliningProcessor

from gateway.core.exceptions import AppException, NotFoundError, ProviderNotFoundError
from gateway.payments.providers.paypal import PaypalPaymentProcessor
from gateway.payments.providers.stripe import StripePaymentProcessor
from gateway.payments.registry import ProcessorRegistry
from gateway.services.checkout_service import CheckoutService


class TestProviderSelection:
    def test_none_uses_default(self, service, payment_request):
        result = service.checkout(payment_request, None)

        assert result.transaction_id.startswith("tx-stripe_")

    def test_empty_string_uses_default(self, service, payment_request):
        result = service.checkout(payment_request, "")

        assert result.transaction_id.startswith("tx-stripe_")

    def test_explicit_selection_wins(self, service, payment_request):
        result = service.checkout(payment_request, "paypal")

        assert result.transaction_id.startswith("tx-paypal_")
        assert result.message == "Paypal Payment processed successfully"

    def test_configured_default_is_used(self, registry, payment_request):
        service = CheckoutService(registry, default_provider_id="paypal")

        assert service.checkout(payment_request).transaction_id.startswith("tx-paypal_")

    @pytest.mark.parametrize(
        ("selected", "expected"),
        [(None, "stripe"), ("", "stripe"), ("paypal", "paypal"), ("amex", "amex")],
    )
    def test_resolve_provider_id(self, service, selected, expected):
        assert service.resolve_provider_id(selected) == expected


class TestDispatch:
    def test_stripe_result_returned(self, service, payment_request):
        result = service.checkout(payment_request, "stripe")

        assert result.success is True
        assert result.transaction_id.startswith("tx-stripe_")
        assert result.message == "Stripe Payment processed successfully"

    def test_result_returned_verbatim(self, payment_request):
        registry = ProcessorRegistry()
        registry.initialize([DecliningProcessor()])
        service = CheckoutService(registry, default_provider_id="decline")

        result = service.checkout(payment_request)

        assert result.success is False
        assert result.message == "Card declined for order o1"

    def test_request_passed_to_processor(self, payment_request):
        seen = []

        class RecordingProcessor(StripePaymentProcessor):
            def process_payment(self, request):
                seen.append(request)
                return super().process_payment(request)

        registry = ProcessorRegistry()
        registry.initialize([RecordingProcessor(), PaypalPaymentProcessor()])

        CheckoutService(registry, "stripe").checkout(payment_request)

        assert seen == [payment_request]


class TestProviderNotFound:
    def test_unknown_selection_raises(self, service, payment_request):
        with pytest.raises(ProviderNotFoundError, match="unknown-id") as exc_info:
            service.checkout(payment_request, "unknown-id")

        error = exc_info.value
        assert error.resolved_id == "unknown-id"
        assert error.requested_id == "unknown-id"
        assert error.error_code == "PROVIDER_NOT_FOUND"
        assert isinstance(error, NotFoundError)
        assert isinstance(error, AppException)

    def test_missing_default_reports_resolved_id(self, registry, payment_request):
        service = CheckoutService(registry, default_provider_id="adyen")

        with pytest.raises(ProviderNotFoundError) as exc_info:
            service.checkout(payment_request, None)

        error = exc_info.value
        assert str(error) == "No payment processor found for id: adyen"
        assert error.requested_id is None
        assert error.details == {"requested_id": None, "resolved_id": "adyen"}

    def test_empty_registry(self, payment_request):
        registry = ProcessorRegistry()
        registry.initialize([])

        with pytest.raises(ProviderNotFoundError):
            CheckoutService(registry, "stripe").checkout(payment_request)
