"""Current user routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, EmailStr, Field

from club.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from club.application.usecase.user import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UserView,
)
from club.domain.service import JWTService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current profile."""

    username: str | None = Field(None, min_length=1, max_length=50)
    email: EmailStr | None = None
    bio: str | None = Field(None, max_length=500)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the current password."""

    current_password: str
    password: str
    password_confirm: str


@router.get("/me", response_model=UserView)
async def get_me(
    use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserView:
    """Get the account behind the bearer token."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(GetCurrentUserRequest(identity=identity))


@router.patch("/me", response_model=UserView)
async def update_me(
    request: UpdateProfileAPIRequest,
    use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserView:
    """Update username, email or bio.

    Raises:
        ValidationError: If no field is given (400)
        EmailAlreadyRegisteredError: If the email is taken (409)
    """
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        UpdateProfileRequest(
            identity=identity,
            username=request.username,
            email=request.email,
            bio=request.bio,
        )
    )


@router.patch("/me/password", response_model=ChangePasswordResponse)
async def change_my_password(
    request: ChangePasswordAPIRequest,
    use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ChangePasswordResponse:
    """Change the password after confirming the current one."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        ChangePasswordRequest(
            identity=identity,
            current_password=request.current_password,
            password=request.password,
            password_confirm=request.password_confirm,
        )
    )


@router.delete("/me", response_model=DeleteAccountResponse)
async def delete_me(
    use_case: FromDishka[DeleteAccountUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteAccountResponse:
    """Delete the current account. Admin accounts get 403."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(DeleteAccountRequest(identity=identity))
