"""
Logging configuration for vacuum.

Structured logging through structlog on top of the standard library, always
written to stderr so that stdout carries only rendered launches.
"""

import logging
import sys
from typing import Any, Dict, Optional

import structlog
from structlog.types import FilteringBoundLogger

from vacuum.config import Settings


class StderrStream:
    """Writes to whatever sys.stderr is at the time of the call."""

    def write(self, message: str) -> int:
        return sys.stderr.write(message)

    def flush(self) -> None:
        sys.stderr.flush()


def add_service_context(
    logger: FilteringBoundLogger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add service context information."""
    event_dict["service"] = "vacuum"
    return event_dict


def configure_logging(settings: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """
    Set up logging for the CLI and the flow.

    Args:
        settings: Settings instance, creates default if None
        level: Overrides the level from settings, e.g. when raised by -v flags
    """
    if settings is None:
        settings = Settings()
    level = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        stream=StderrStream(),
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> FilteringBoundLogger:
    return structlog.get_logger(name)
