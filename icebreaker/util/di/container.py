"""Production dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from icebreaker.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container the API runs with.

    Every mockable component gets its production implementation, so
    entity stores are JSON files under `STORAGE__PATH`. Settings are read
    from the environment the first time anything resolves them.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach `container` to `app` so routes can use `FromDishka`."""
    setup_dishka(container, app)
