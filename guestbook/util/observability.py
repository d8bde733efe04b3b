"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("comment_service.like_comment", comment_id=str(comment_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from guestbook.config import Settings

SERVICE_NAME = "guestbook-api"

# Polled by load balancers; tracing them only adds noise
UNTRACED_PATHS = ("/health",)


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent only when a token is configured. Tests never send.
    """
    if settings.environment == "test":
        return False
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Set OBSERVABILITY__LOGFIRE_TOKEN to send telemetry to Logfire cloud;
    without it everything is written to the console only.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    config_kwargs = {
        "service_name": SERVICE_NAME,
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        frontend_origin=settings.frontend_origin,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request with its method, path and duration.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        return {
            **attributes,
            "method": request.method,
            "path": request.url.path,
        }

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
        excluded_urls=",".join(UNTRACED_PATHS),
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented", database=engine.url.database)
