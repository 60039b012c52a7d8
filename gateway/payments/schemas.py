"""Payment schemas shared by the checkout service and providers."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PaymentRequest(BaseModel):
    """Checkout request handed to a payment processor."""

    model_config = ConfigDict(frozen=True)

    order_id: str = Field(..., min_length=1, description="Merchant order identifier")
    amount: Decimal = Field(..., description="Amount to charge")
    currency: str = Field(..., min_length=1, description="ISO-4217 currency code")


class PaymentResult(BaseModel):
    """Normalized outcome returned by every payment processor.

    Declined payments are reported with success=False rather than raised.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    transaction_id: str = Field(..., alias="transactionId")
    message: str
