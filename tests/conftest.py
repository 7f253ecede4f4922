"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from club.config import AuthSettings
from club.domain.model import Tag, User
from club.domain.repository import TagRepository, UserRepository
from club.domain.value import MembershipStatus, TagId, TagKind, TagName, UserId, UserRole
from club.util.jwt import create_token
from club.util.password import hash_password

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

SYSTEM_TAGS = ["robotics", "electronics", "programming", "events"]
PASSWORD = "secret123"


def make_user(
    role: UserRole = UserRole.MEMBER,
    membership_status: MembershipStatus | None = None,
    username: str | None = None,
    email: str | None = None,
    password: str = PASSWORD,
) -> User:
    """Build a user; members and admins default to an approved membership."""
    if membership_status is None:
        membership_status = (
            MembershipStatus.PENDING
            if role == UserRole.USER
            else MembershipStatus.APPROVED
        )
    suffix = uuid4().hex[:8]
    return User(
        id=UserId(uuid4()),
        username=username or f"{role.value}-{suffix}",
        email=email or f"{role.value}-{suffix}@example.com",
        password_hash=hash_password(password),
        role=role,
        membership_status=membership_status,
    )


def make_system_tag(name: str) -> Tag:
    return Tag(id=TagId(uuid4()), name=TagName(name), kind=TagKind.SYSTEM)


def make_user_tag(name: str, created_by: UserId) -> Tag:
    now = datetime.now()
    return Tag(
        id=TagId(uuid4()),
        name=TagName(name),
        kind=TagKind.USER,
        created_by=created_by,
        created_at=now,
        updated_at=now,
    )


async def seed_system_tags(
    tag_repository: TagRepository, names: list[str] = SYSTEM_TAGS
) -> dict[str, Tag]:
    """Save SYSTEM tags and return them by name."""
    tags = {}
    for name in names:
        tags[name] = await tag_repository.save(make_system_tag(name))
    return tags


async def seed_user(user_repository: UserRepository, **kwargs) -> User:
    return await user_repository.save(make_user(**kwargs))


def bearer(user: User, settings: AuthSettings) -> dict[str, str]:
    """Authorization header for a user, signed with the app's auth settings."""
    token = create_token(
        user_id=str(user.id),
        role=user.role.value,
        membership_status=user.membership_status.value,
        settings=settings,
    )
    return {"Authorization": f"Bearer {token}"}
