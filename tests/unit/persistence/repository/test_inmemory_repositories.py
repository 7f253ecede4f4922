"""Unit tests for the in-memory repositories used by the test container."""

from uuid import uuid4

import pytest

from club.domain.error import EmailAlreadyRegisteredError, TagConflictError
from club.domain.model import Tag
from club.domain.repository import TagRepository, UserRepository
from club.domain.value import TagId, TagKind, TagName, UserId
from tests.conftest import make_system_tag, make_user, make_user_tag
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestTagRepository:
    @pytest.mark.asyncio
    async def test_same_name_and_kind_conflicts(self, unit_env):
        """Should enforce (name, kind) uniqueness like the database."""
        repo = await unit_env.get(TagRepository)
        await repo.save(make_system_tag("robotics"))

        with pytest.raises(TagConflictError):
            await repo.save(make_system_tag("Robotics"))

    @pytest.mark.asyncio
    async def test_same_name_in_both_namespaces(self, unit_env):
        """Should allow a USER tag to shadow a SYSTEM name and prefer SYSTEM."""
        repo = await unit_env.get(TagRepository)
        user_tag = await repo.save(make_user_tag("events", UserId(uuid4())))
        system_tag = await repo.save(make_system_tag("events"))

        found = await repo.find_by_name(TagName("events"))
        found_user = await repo.find_by_name(TagName("events"), kind=TagKind.USER)

        assert found == system_tag
        assert found_user == user_tag
        assert len(await repo.find_by_names([TagName("events")])) == 2

    @pytest.mark.asyncio
    async def test_resave_same_tag_is_allowed(self, unit_env):
        repo = await unit_env.get(TagRepository)
        tag = await repo.save(make_system_tag("robotics"))

        await repo.save(tag)

        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_find_all_orders_by_name(self, unit_env):
        repo = await unit_env.get(TagRepository)
        for name in ["servo", "arduino", "lidar"]:
            await repo.save(
                Tag(id=TagId(uuid4()), name=TagName(name), kind=TagKind.SYSTEM)
            )

        tags = await repo.find_all(limit=2)

        assert [t.name.root for t in tags] == ["arduino", "lidar"]
        assert await repo.count(kind=TagKind.USER) == 0


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_email_is_unique(self, unit_env):
        repo = await unit_env.get(UserRepository)
        await repo.save(make_user(email="ada@example.com"))

        with pytest.raises(EmailAlreadyRegisteredError):
            await repo.save(make_user(email="ada@example.com"))

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, unit_env):
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user(email="ada@example.com"))

        assert await repo.find_by_email("ADA@example.com") == user
