"""Checkout API schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from gateway.payments.schemas import PaymentRequest


class CheckoutRequest(BaseModel):
    """Request to charge an order."""

    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(..., alias="orderId", min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0, description="Amount to charge")
    currency: str = Field(..., min_length=1, max_length=16)
    provider_id: str | None = Field(
        None,
        alias="providerId",
        description="Processor id; the configured default is used when omitted",
    )

    def to_payment_request(self) -> PaymentRequest:
        return PaymentRequest(
            order_id=self.order_id,
            amount=self.amount,
            currency=self.currency,
        )


class ProviderInfo(BaseModel):
    """Registered payment processor."""

    id: str
    name: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: str  # Error code
    message: str  # Human-readable message
    details: dict | None = None


class CheckoutErrorCode:
    """Error codes for checkout operations."""

    PROVIDER_NOT_FOUND = "provider_not_found"
