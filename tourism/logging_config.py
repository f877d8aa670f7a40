"""
Operational Logging

structlog on top of the standard logging module. Modules grab a logger with
`structlog.get_logger(__name__)` and log events with structured keys; this
module decides where those lines go and how they look.

Passwords are never passed to a logger.
"""

import logging
import sys
from typing import Optional

import structlog

from tourism.config import AppSettings, get_settings


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Configure structlog and the root stdlib logger.

    Log lines go to stderr so they never interleave with the menu on stdout.
    """
    settings = settings or get_settings().app

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=settings.effective_log_level,
        force=True,
    )

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
