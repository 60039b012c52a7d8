"""Payment providers module."""

import importlib
from collections.abc import Iterable, Iterator

from gateway.core.exceptions import ProviderLoadError
from gateway.core.logging import get_logger
from gateway.payments.providers.base import PaymentProcessor

logger = get_logger(__name__)

# Built-in processors, registered in this order.
BUILTIN_PROCESSORS: tuple[str, ...] = (
    "gateway.payments.providers.stripe.provider:StripePaymentProcessor",
    "gateway.payments.providers.paypal.provider:PaypalPaymentProcessor",
)


def load_processor(path: str) -> PaymentProcessor:
    """Import and instantiate a processor from a 'package.module:ClassName' path.

    Args:
        path: Dotted module path and class name separated by a colon

    Returns:
        New processor instance

    Raises:
        ProviderLoadError: If the path is malformed, the import fails or the
            class does not implement PaymentProcessor
    """
    module_name, sep, class_name = path.partition(":")
    if not sep or not module_name or not class_name:
        raise ProviderLoadError(
            message=f"Invalid processor path: {path!r} (expected 'package.module:ClassName')",
            details={"path": path},
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ProviderLoadError(
            message=f"Cannot import processor module: {module_name}",
            details={"path": path, "error": str(e)},
        ) from e

    processor_cls = getattr(module, class_name, None)
    if not isinstance(processor_cls, type) or not issubclass(processor_cls, PaymentProcessor):
        raise ProviderLoadError(
            message=f"{path} is not a PaymentProcessor class",
            details={"path": path},
        )

    return processor_cls()


def discover_processors(extra_paths: Iterable[str] = ()) -> Iterator[PaymentProcessor]:
    """Yield every processor available to the process.

    Built-in processors come first, then configured extra paths.
    """
    for path in (*BUILTIN_PROCESSORS, *extra_paths):
        logger.debug("Loading payment processor: %s", path)
        yield load_processor(path)


__all__ = [
    "BUILTIN_PROCESSORS",
    "PaymentProcessor",
    "discover_processors",
    "load_processor",
]
