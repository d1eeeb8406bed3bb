"""
Structured logging configuration
"""
import logging
import sys

import structlog

from profile_parser.core.config import settings


def configure_logging(level: str = None, json_logs: bool = None, stream=None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Logging level name, defaults to settings.LOG_LEVEL
        json_logs: Render JSON lines instead of console output, defaults to settings.LOG_JSON
        stream: Where log lines are written, defaults to stdout
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_logs is None:
        json_logs = settings.LOG_JSON
    stream = stream or sys.stdout

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, level, logging.INFO),
        force=True,
    )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
