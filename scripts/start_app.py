#!/usr/bin/env python3
"""Start the FastAPI application after checking its database.

The process exits with status 1 when the database connection string is
missing or the database cannot be reached.
"""

import asyncio
import sys

import logfire
import uvicorn

from guestbook.config import Settings
from guestbook.persistence.database import prepare_database
from guestbook.util.error import ConfigurationError
from guestbook.util.logging import setup_logging
from guestbook.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure logging early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        asyncio.run(prepare_database(settings))
    except ConfigurationError as e:
        logfire.fatal("Application startup aborted", error=str(e))
        return 1
    except Exception as e:
        logfire.fatal(
            "Database is unreachable",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1

    logfire.info(
        "Starting FastAPI application",
        host=settings.host,
        port=settings.port,
        frontend_origin=settings.frontend_origin,
    )
    uvicorn.run(
        "guestbook.interface.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level="info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
