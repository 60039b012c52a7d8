"""Payment API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from gateway.api.dependencies import (
    get_checkout_request,
    get_checkout_service,
    get_registry,
)
from gateway.api.schemas.checkout import (
    CheckoutErrorCode,
    CheckoutRequest,
    ErrorResponse,
    ProviderInfo,
)
from gateway.core.exceptions import ProviderNotFoundError
from gateway.payments.registry import ProcessorRegistry
from gateway.payments.schemas import PaymentResult
from gateway.services.checkout_service import CheckoutService

router = APIRouter(tags=["payments"])


@router.get("/providers", response_model=list[ProviderInfo])
async def list_providers(
    registry: ProcessorRegistry = Depends(get_registry),
) -> list[ProviderInfo]:
    """List registered payment processors.

    Order is not guaranteed.
    """
    return [
        ProviderInfo(id=processor.id(), name=processor.get_name())
        for processor in registry.all()
    ]


@router.post(
    "/checkout",
    response_model=PaymentResult,
    responses={
        400: {"model": ErrorResponse, "description": "Payment processor not found"},
        422: {"description": "Missing or invalid checkout parameters"},
    },
)
async def checkout(
    request: CheckoutRequest = Depends(get_checkout_request),
    service: CheckoutService = Depends(get_checkout_service),
) -> PaymentResult:
    """Charge an order with the selected or default payment processor.

    Parameters are read from the query string, form fields or a JSON
    body (orderId, amount, currency, providerId).

    Error codes:
    - `provider_not_found`: No processor registered under the resolved id

    Args:
        request: Order, amount, currency and optional providerId

    Returns:
        Result reported by the processor
    """
    try:
        return service.checkout(
            request.to_payment_request(),
            request.provider_id,
        )
    except ProviderNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": CheckoutErrorCode.PROVIDER_NOT_FOUND,
                "message": str(e),
                "details": e.details,
            },
        )
