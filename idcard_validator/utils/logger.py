"""structlog configuration for host applications."""

from __future__ import annotations

import logging
import sys

import structlog

from idcard_validator.models.config import Settings


def configure_logging(level: str | None = None) -> None:
    """Route structlog output through stdlib logging at the given level.

    When level is None the IDCARD_LOG_LEVEL setting is used. The package
    never calls this itself; applications embedding the validator call it
    once at startup.
    """
    if level is None:
        level = Settings().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
