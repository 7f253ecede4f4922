"""Admin dashboard use case."""

from pydantic import BaseModel

from club.domain.service import PostService, ProjectService, TagService, UserService
from club.domain.value import Identity, MembershipStatus, TagKind, UserRole

from .guard import require_admin


class DashboardRequest(BaseModel):
    """Dashboard request."""

    identity: Identity


class UserStats(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int
    members: int
    admins: int


class ContentStats(BaseModel):
    posts: int
    projects: int


class TagStats(BaseModel):
    system: int
    user: int


class DashboardResponse(BaseModel):
    """Counters for the admin dashboard."""

    users: UserStats
    content: ContentStats
    tags: TagStats


class DashboardUseCase:
    """Use case for the admin overview counters."""

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        project_service: ProjectService,
        tag_service: TagService,
    ) -> None:
        """Initialize dashboard use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
            project_service: Project domain service
            tag_service: Tag domain service
        """
        self.user_service = user_service
        self.post_service = post_service
        self.project_service = project_service
        self.tag_service = tag_service

    async def execute(self, request: DashboardRequest) -> DashboardResponse:
        require_admin(request.identity, "Dashboard")

        count_users = self.user_service.count_users
        users = UserStats(
            total=await count_users(),
            pending=await count_users(membership_status=MembershipStatus.PENDING),
            approved=await count_users(membership_status=MembershipStatus.APPROVED),
            rejected=await count_users(membership_status=MembershipStatus.REJECTED),
            members=await count_users(role=UserRole.MEMBER),
            admins=await count_users(role=UserRole.ADMIN),
        )
        return DashboardResponse(
            users=users,
            content=ContentStats(
                posts=await self.post_service.count(),
                projects=await self.project_service.count(),
            ),
            tags=TagStats(
                system=await self.tag_service.count_tags(TagKind.SYSTEM),
                user=await self.tag_service.count_tags(TagKind.USER),
            ),
        )
