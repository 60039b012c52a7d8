from typing import Any


class AppException(Exception):
    """Base application exception."""

    error_code: str = "APP_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(error_code={self.error_code!r}, message={self.message!r})"


class NotFoundError(AppException):
    """Resource not found."""

    error_code = "NOT_FOUND"
    message = "Resource not found"


class ProviderNotFoundError(NotFoundError):
    """No payment processor is registered under the resolved id."""

    error_code = "PROVIDER_NOT_FOUND"
    message = "Payment processor not found"

    def __init__(
        self,
        resolved_id: str,
        requested_id: str | None = None,
        message: str | None = None,
    ) -> None:
        self.resolved_id = resolved_id
        self.requested_id = requested_id
        super().__init__(
            message=message or f"No payment processor found for id: {resolved_id}",
            details={"requested_id": requested_id, "resolved_id": resolved_id},
        )


class RegistryLockedError(AppException):
    """Registration attempted after the registry was sealed."""

    error_code = "REGISTRY_LOCKED"
    message = "Processor registry is read-only after initialization"


class ProviderLoadError(AppException):
    """Configured processor path could not be loaded."""

    error_code = "PROVIDER_LOAD_ERROR"
    message = "Failed to load payment processor"
