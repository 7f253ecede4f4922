"""Seeding helpers shared by the end-to-end tests."""

from club.config import AuthSettings
from club.domain.repository import TagRepository, UserRepository
from club.domain.value import UserRole
from tests.conftest import bearer, seed_system_tags, seed_user
from tests.harness import AppEnvironment


async def seed_tags(env: AppEnvironment) -> None:
    async with env.request_scope() as scope:
        await seed_system_tags(await scope.get(TagRepository))


async def login_as(env: AppEnvironment, role: UserRole = UserRole.MEMBER, **kwargs):
    """Seed a user and return it with its Authorization header."""
    async with env.request_scope() as scope:
        user = await seed_user(await scope.get(UserRepository), role=role, **kwargs)
        headers = bearer(user, await scope.get(AuthSettings))
    return user, headers
