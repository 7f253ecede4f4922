"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from club.config import Settings
from club.interface.api.errors import register_error_handlers
from club.interface.api.routes import admin, auth, comments, content, health, tags, users
from club.util.di.container import create_container, setup_di
from club.util.observability import instrument_app

ROUTERS = (
    health.router,
    auth.router,
    users.router,
    admin.router,
    tags.router,
    content.posts_router,
    content.projects_router,
    comments.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Closes APP-scoped resources: database engine, HTTP client
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire is expected to be configured already (``scripts/start_app.py``
    does it before uvicorn imports this module).

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Robotics Club API",
        description="Member projects, club posts and discussion",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_app(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    register_error_handlers(app_instance)
    setup_di(app_instance, container or create_container())

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


app = create_app()
