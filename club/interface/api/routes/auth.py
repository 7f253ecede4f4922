"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from club.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    TokenResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> TokenResponse:
    """Create an account and request membership.

    The account starts as role ``user`` with a pending membership request.

    Example:
        POST /auth/register
        {"username": "ada", "email": "ada@example.com", "password": "secret1"}

        Response (201):
        {"token": "eyJ..."}
    """
    with logfire.span("api.register"):
        return await register_use_case.execute(request)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> TokenResponse:
    """Exchange email and password for a bearer token.

    Raises:
        AuthenticationError: If the credentials are wrong (401)
    """
    with logfire.span("api.login"):
        return await login_use_case.execute(request)
