"""Logging setup."""

import io
import json
import logging

import pytest
import structlog

from gateway.core.logging import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_setup_logging_json(restore_root_logger):
    """
    Scenario: json format, record logged through a stdlib module logger
    Expected: one JSON line with event, level, logger, service and timestamp
    """
    buf = io.StringIO()
    setup_logging(level="debug", log_format="json", stream=buf)

    logging.getLogger("gateway.test").info("Checkout dispatched: order_id=%s", "o1")

    payload = json.loads(buf.getvalue().strip().splitlines()[-1])
    assert payload["event"] == "Checkout dispatched: order_id=o1"
    assert payload["level"] == "info"
    assert payload["logger"] == "gateway.test"
    assert payload["service"] == "checkout-gateway"
    assert "timestamp" in payload
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1


def test_setup_logging_standard(restore_root_logger):
    buf = io.StringIO()
    setup_logging(level="WARNING", log_format="standard", stream=buf)

    get_logger("gateway.test").warning("Provider %s skipped", "amex")

    line = buf.getvalue().strip()
    assert "Provider amex skipped" in line
    assert not line.startswith("{")
    assert restore_root_logger.level == logging.WARNING


def test_level_filters_records(restore_root_logger):
    buf = io.StringIO()
    setup_logging(level="WARNING", log_format="json", stream=buf)

    get_logger("gateway.test").info("hidden")

    assert buf.getvalue() == ""


def test_get_logger_returns_named_logger():
    logger = get_logger("gateway.payments.registry")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "gateway.payments.registry"
