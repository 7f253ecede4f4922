"""Application layer DI providers."""

from dishka import Scope, provide

from club.application.transaction import RequestTransaction
from club.application.usecase.admin import (
    ApproveMembershipUseCase,
    DashboardUseCase,
    ListPendingUsersUseCase,
    ListUsersUseCase,
    RejectMembershipUseCase,
)
from club.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from club.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from club.application.usecase.content import (
    CreateContentUseCase,
    DeleteContentUseCase,
    GetContentUseCase,
    ListContentUseCase,
    RemoveContentImageUseCase,
    UpdateContentUseCase,
    UploadContentImageUseCase,
)
from club.application.usecase.tag import CreateSystemTagUseCase, ListTagsUseCase
from club.application.usecase.user import (
    ChangePasswordUseCase,
    DeleteAccountUseCase,
    UpdateProfileUseCase,
)
from club.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are built from their constructor signatures; every dependency
    is a domain service or settings object already known to the container.
    """

    scope = Scope.REQUEST

    request_transaction = provide(RequestTransaction)

    # Auth use cases
    register_use_case = provide(RegisterUseCase)
    login_use_case = provide(LoginUseCase)
    current_user_use_case = provide(GetCurrentUserUseCase)

    # Content use cases
    create_content_use_case = provide(CreateContentUseCase)
    get_content_use_case = provide(GetContentUseCase)
    list_content_use_case = provide(ListContentUseCase)
    update_content_use_case = provide(UpdateContentUseCase)
    delete_content_use_case = provide(DeleteContentUseCase)
    upload_image_use_case = provide(UploadContentImageUseCase)
    remove_image_use_case = provide(RemoveContentImageUseCase)

    # Comment use cases
    create_comment_use_case = provide(CreateCommentUseCase)
    list_comments_use_case = provide(ListCommentsUseCase)
    update_comment_use_case = provide(UpdateCommentUseCase)
    delete_comment_use_case = provide(DeleteCommentUseCase)

    # Tag use cases
    list_tags_use_case = provide(ListTagsUseCase)
    create_system_tag_use_case = provide(CreateSystemTagUseCase)

    # Admin use cases
    list_users_use_case = provide(ListUsersUseCase)
    list_pending_users_use_case = provide(ListPendingUsersUseCase)
    approve_membership_use_case = provide(ApproveMembershipUseCase)
    reject_membership_use_case = provide(RejectMembershipUseCase)
    dashboard_use_case = provide(DashboardUseCase)

    # User use cases
    update_profile_use_case = provide(UpdateProfileUseCase)
    change_password_use_case = provide(ChangePasswordUseCase)
    delete_account_use_case = provide(DeleteAccountUseCase)
