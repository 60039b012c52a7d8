"""Command line interface for the checkout gateway.

Usage:
    # Start the HTTP server
    checkout-gateway serve --port 8000

    # List discovered payment processors
    checkout-gateway providers

    # Run a checkout without the HTTP layer
    checkout-gateway checkout o1 1000 USD --provider paypal
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation

from gateway.core.config import settings
from gateway.core.exceptions import AppException
from gateway.core.logging import setup_logging
from gateway.payments.registry import ProcessorRegistry
from gateway.payments.schemas import PaymentRequest
from gateway.services.checkout_service import CheckoutService


def _build_registry() -> ProcessorRegistry:
    registry = ProcessorRegistry()
    registry.initialize(extra_paths=settings.payment_extra_providers)
    return registry


def serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "gateway.api_main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def list_providers(args: argparse.Namespace) -> int:
    registry = _build_registry()

    processors = sorted(registry.all(), key=lambda p: p.id())
    if not processors:
        print("No payment processors registered")
        return 0

    print(f"{'ID':<15} {'Name':<30} {'Default':<8}")
    print("-" * 55)
    for processor in processors:
        is_default = "yes" if processor.id() == settings.payment_default_provider else ""
        print(f"{processor.id():<15} {processor.get_name():<30} {is_default:<8}")
    return 0


def run_checkout(args: argparse.Namespace) -> int:
    try:
        amount = Decimal(args.amount)
    except InvalidOperation:
        print(f"Error: invalid amount '{args.amount}'", file=sys.stderr)
        return 2

    service = CheckoutService(_build_registry(), settings.payment_default_provider)
    request = PaymentRequest(order_id=args.order_id, amount=amount, currency=args.currency)

    try:
        result = service.checkout(request, args.provider)
    except AppException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"Success: {result.success}")
    print(f"Transaction: {result.transaction_id}")
    print(f"Message: {result.message}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Checkout gateway CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host, help="Bind address")
    serve_parser.add_argument("--port", "-p", type=int, default=settings.port, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    # Providers command
    subparsers.add_parser("providers", help="List payment processors")

    # Checkout command
    checkout_parser = subparsers.add_parser("checkout", help="Run a simulated checkout")
    checkout_parser.add_argument("order_id", help="Order identifier")
    checkout_parser.add_argument("amount", help="Amount to charge")
    checkout_parser.add_argument("currency", help="Currency code, e.g. USD")
    checkout_parser.add_argument(
        "--provider",
        "-P",
        help="Processor id (defaults to PAYMENT_DEFAULT_PROVIDER)",
    )

    args = parser.parse_args(argv)

    setup_logging()

    if args.command == "serve":
        return serve(args)
    elif args.command == "providers":
        return list_providers(args)
    elif args.command == "checkout":
        return run_checkout(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
