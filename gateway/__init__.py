"""Checkout gateway: payment provider registry and checkout dispatch."""

__version__ = "1.0.0"
