"""Dependencies resolving startup-built services from the application state."""

import json
from typing import Any

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from gateway.api.schemas.checkout import CheckoutRequest
from gateway.payments.registry import ProcessorRegistry
from gateway.services.checkout_service import CheckoutService

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_registry(request: Request) -> ProcessorRegistry:
    """Processor registry built during application startup."""
    return request.app.state.registry


def get_checkout_service(
    request: Request,
    registry: ProcessorRegistry = Depends(get_registry),
) -> CheckoutService:
    """Checkout service bound to the registry and configured default provider."""
    return CheckoutService(registry, request.app.state.default_provider_id)


async def get_checkout_request(request: Request) -> CheckoutRequest:
    """Collect checkout parameters from the query string and the body.

    Accepts orderId/amount/currency/providerId as query parameters, form
    fields or a JSON object. Body values override query values.

    Raises:
        RequestValidationError: If parameters are missing or invalid (422)
    """
    params: dict[str, Any] = dict(request.query_params)

    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        params.update(form)
    elif content_type.startswith("application/json"):
        raw = await request.body()
        if raw:
            try:
                body = json.loads(raw)
            except json.JSONDecodeError as e:
                raise RequestValidationError(
                    [{"type": "json_invalid", "loc": ("body", e.pos), "msg": "JSON decode error", "input": {}}]
                ) from e
            if not isinstance(body, dict):
                raise RequestValidationError(
                    [{"type": "model_attributes_type", "loc": ("body",), "msg": "Input should be an object", "input": body}]
                )
            params.update(body)

    try:
        return CheckoutRequest.model_validate(params)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e
