"""Current-user use cases."""

from .change_password import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
)
from .delete_account import (
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
)
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase
from .views import UserView

__all__ = [
    "UserView",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "ChangePasswordUseCase",
    "DeleteAccountRequest",
    "DeleteAccountResponse",
    "DeleteAccountUseCase",
]
