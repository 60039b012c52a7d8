"""Pytest fixtures for the checkout gateway."""

import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Make fake_processors importable by dotted path
sys.path.insert(0, str(Path(__file__).parent))

from gateway.api import create_api
from gateway.core.config import settings
from gateway.payments.registry import ProcessorRegistry
from gateway.payments.schemas import PaymentRequest
from gateway.services.checkout_service import CheckoutService


@pytest.fixture
def registry() -> ProcessorRegistry:
    """Registry with the built-in processors."""
    registry = ProcessorRegistry()
    registry.initialize()
    return registry


@pytest.fixture
def service(registry) -> CheckoutService:
    return CheckoutService(registry, default_provider_id="stripe")


@pytest.fixture
def payment_request() -> PaymentRequest:
    return PaymentRequest(order_id="o1", amount=1000, currency="USD")


@pytest.fixture
def no_rate_limit(monkeypatch):
    monkeypatch.setattr(settings, "rate_limit_enabled", False)


@pytest.fixture
def app(no_rate_limit):
    """Application with discovery left to the startup hook."""
    return create_api(default_provider_id="stripe")


@pytest_asyncio.fixture
async def client(app):
    """HTTP client bound to the app, with startup/shutdown run."""
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://gateway.test") as client:
            yield client
