#!/usr/bin/env python3
"""Serve the club API with uvicorn.

Logfire is configured before uvicorn imports ``club.interface.api.app`` so
that import-time failures are reported too.
"""

import sys

import logfire
import uvicorn

from club.config import Settings
from club.util.logging import setup_logging
from club.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting club API",
        environment=settings.environment,
        api_url=settings.api.base_url,
        port=settings.port,
    )
    try:
        uvicorn.run(
            "club.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.environment != "development",
        )
    except Exception as e:
        logfire.error(
            "Club API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
