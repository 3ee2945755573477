"""
Logging setup for the example application.

Imported for its side effect. Sends loguru output to stderr and routes
records from the library's standard-library loggers through loguru.
"""

import logging
import sys

from loguru import logger

LOG_LEVEL = "INFO"


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logger.remove()
logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
)

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
