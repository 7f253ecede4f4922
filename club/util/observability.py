"""Logfire setup for the club API.

Services log through ``logfire`` directly and wrap each domain operation in
a span named ``<service>.<operation>``::

    with logfire.span("tag_service.resolve_tag_set", main_tag=main_tag):
        ...

This module only configures the SDK and attaches the library
instrumentations (FastAPI, httpx for the image host, SQLAlchemy).
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from club.config import Settings

SERVICE_NAME = "robotics-club-api"


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire SDK.

    Telemetry leaves the process only when ``OBSERVABILITY__SEND_TO_LOGFIRE``
    is true, or when it is unset and ``OBSERVABILITY__LOGFIRE_TOKEN`` is
    present. Console output is always on; ``DEBUG=true`` makes it verbose.

    Args:
        settings: Application settings
    """
    send = _should_send(settings)
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        version=settings.git_sha,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    extra = {**attributes}
    method = getattr(request, "method", None)
    if method:
        extra["method"] = method
    url = getattr(request, "url", None)
    if url is not None:
        extra["path"] = url.path
    client = getattr(request, "client", None)
    if client:
        extra["client_host"] = client.host
    return extra


def instrument_app(app: FastAPI) -> None:
    """Trace incoming requests and outgoing httpx calls.

    Authorization headers are not captured.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_httpx()
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI and httpx instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
