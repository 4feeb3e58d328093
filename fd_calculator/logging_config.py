"""
Logging setup.

Configures the loguru logger for applications embedding the calculator.
"""

import sys

from loguru import logger

from fd_calculator.config import Settings, settings as default_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure stderr logging and, when configured, a rotating log file."""
    settings = settings or default_settings

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="1 day",
            retention="7 days",
            level=settings.log_level,
            encoding="utf-8",
        )

    logger.debug("FD calculator logging configured")
