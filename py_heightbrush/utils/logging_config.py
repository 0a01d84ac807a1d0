"""
Structured logging setup.

Routes structlog through the standard library so host applications keep
control of handlers, and renders either JSON lines or a console format.
"""

import logging
import sys
from typing import Optional

import structlog

PACKAGE_LOGGER = "py_heightbrush"

# Library events stay silent until a host configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str):
    """
    Get a structlog logger backed by the stdlib logger ``name``.

    Events go through the stdlib logging tree, so nothing is printed unless
    ``configure_logging`` or the host application has attached a handler.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def configure_logging(level: str = "INFO", fmt: str = "json", stream: Optional[object] = None) -> None:
    """
    Configure structlog and the ``py_heightbrush`` stdlib logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO")
        fmt: "json" for JSON lines, anything else for console output
        stream: Optional stream for the handler, defaults to stdout
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Avoid duplicate handlers when reconfigured
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
