"""Domain layer DI providers."""

from dishka import Scope, provide

from club.config import AuthSettings, ImageSettings
from club.domain.repository import (
    CommentRepository,
    PostRepository,
    ProjectRepository,
    TagRepository,
    UserRepository,
)
from club.domain.service import (
    AuthorizationService,
    CommentService,
    ContentCatalog,
    ImageHost,
    JWTService,
    Mailer,
    MembershipService,
    PostService,
    ProjectService,
    TagService,
    UserService,
)
from club.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authorization_service(self) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService()

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        image_host: ImageHost,
        image_settings: ImageSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            tag_service=tag_service,
            image_host=image_host,
            image_settings=image_settings,
        )

    @provide
    def get_project_service(
        self,
        project_repository: ProjectRepository,
        tag_service: TagService,
        image_host: ImageHost,
        image_settings: ImageSettings,
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository,
            tag_service=tag_service,
            image_host=image_host,
            image_settings=image_settings,
        )

    @provide
    def get_content_catalog(
        self, post_service: PostService, project_service: ProjectService
    ) -> ContentCatalog:
        """Provide content catalog keyed by kind."""
        return ContentCatalog(post_service=post_service, project_service=project_service)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_membership_service(
        self, user_repository: UserRepository, mailer: Mailer
    ) -> MembershipService:
        """Provide membership review domain service."""
        return MembershipService(user_repository=user_repository, mailer=mailer)
