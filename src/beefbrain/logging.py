"""Structured logging setup for Beef Brain.

Library code only asks for loggers with ``structlog.get_logger(__name__)``;
configuration happens once, at the command-line boundary.
"""

import logging
import sys

import structlog
from structlog.types import Processor


def configure_logging(*, level: str = "WARNING", json_format: bool = False) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        json_format: Render JSON lines instead of human-readable console output
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    # Logs go to stderr so stdout stays clean for rendered documents
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=log_level,
        stream=sys.stderr,
        force=True,
    )
