"""Logging configuration for the application.

Application events go through logfire; this module configures the stdlib
loggers used by uvicorn and SQLAlchemy so their output lands in the same
stream.
"""

import logging
import sys

from guestbook.config import Settings

# Loggers of libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # SQL echo is controlled by settings.debug on the engine itself
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Access logs only in debug; errors from uvicorn always pass
    logging.getLogger("uvicorn.access").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("guestbook").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s, port=%s",
        settings.environment,
        logging.getLevelName(level),
        settings.port,
    )
