"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from club.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container from the production implementation of every provider.

    Settings are read from the environment when first resolved, not here.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so ``DishkaRoute`` handlers can resolve from it."""
    setup_dishka(container, app)
