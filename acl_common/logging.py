"""
Shared logging configuration for the ACL service.
"""

import sys
import logging
from typing import Any, Callable, Dict

import structlog

EventDict = Dict[str, Any]


def configure_logging(service_name: str, log_level: str = "info") -> None:
    """Route structlog through stdlib logging as JSON lines on stdout."""
    level = getattr(logging, log_level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            service_context(service_name),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def service_context(service_name: str) -> Callable[[Any, str, EventDict], EventDict]:
    """Build a processor tagging every event with ``service_name``."""
    def add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service_context


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
