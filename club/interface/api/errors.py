"""Mapping of domain and adapter errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from club.adapter.error import AdapterError
from club.application.transaction import RequestTransaction
from club.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)

# Checked in order; the first matching base wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error. Anything unlisted is a 400."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def fail_transaction(request: Request, reason: str) -> None:
    """Make the request session roll back although the error was handled."""
    container = getattr(request.state, "dishka_container", None)
    if container is None:
        return
    transaction = await container.get(RequestTransaction)
    transaction.mark_failed(reason)


def _field_errors(errors) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(
                str(part) for part in err["loc"] if part not in ("body", "query", "path")
            ),
            "message": err["msg"],
        }
        for err in errors
    ]


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    await fail_transaction(request, exc.code)
    status_code = status_for(exc)
    logfire.info(
        "Request failed with domain error",
        path=request.url.path,
        code=exc.code,
        status_code=status_code,
        error=str(exc),
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "code": exc.code},
        headers=headers,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    await fail_transaction(request, "RequestValidationError")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": _field_errors(exc.errors())},
    )


async def handle_model_validation_error(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    await fail_transaction(request, "ValidationError")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": _field_errors(exc.errors())},
    )


async def handle_adapter_error(request: Request, exc: AdapterError) -> JSONResponse:
    await fail_transaction(request, type(exc).__name__)
    logfire.error(
        "External service failed",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register every error handler on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PydanticValidationError, handle_model_validation_error)
    app.add_exception_handler(AdapterError, handle_adapter_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
