"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from guestbook.util.di import PROVIDERS, get_provider


def create_container(*overrides: Provider) -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Args:
        *overrides: Extra providers registered last, replacing any
            dependency they also provide

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, *overrides, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    dishka opens a REQUEST scope per HTTP request, so each request gets its
    own database session and repositories.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
