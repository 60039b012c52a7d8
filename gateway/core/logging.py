"""Logging setup using structlog."""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor

from gateway.core.config import settings


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add service name to every log entry."""
    event_dict["service"] = settings.app_name
    return event_dict


def _shared_processors(json_logs: bool) -> list[Processor]:
    timestamper = (
        structlog.processors.TimeStamper(fmt="iso")
        if json_logs
        else structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_app_context,
        timestamper,
    ]


def setup_logging(
    level: str | None = None,
    log_format: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure root logger from settings.

    Records from stdlib loggers are rendered by structlog: JSON lines for
    "json", human-readable console lines for "standard".

    Args:
        level: Override for settings.log_level
        log_format: Override for settings.log_format ("json" or "standard")
        stream: Output stream, stdout by default
    """
    level = (level or settings.log_level).upper()
    json_logs = (log_format or settings.log_format) == "json"

    shared = _shared_processors(json_logs)
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get module logger.

    Returns a stdlib logger so %-style arguments keep working; output is
    rendered by the structlog formatter installed by setup_logging().
    """
    return logging.getLogger(name)


__all__ = ["get_logger", "setup_logging"]
