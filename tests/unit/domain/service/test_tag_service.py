"""Unit tests for TagService."""

from uuid import uuid4

import pytest

from club.domain.error import (
    EmptyTagSetError,
    InvalidMainTagError,
    TagConflictError,
    ValidationError,
)
from club.domain.model import Tag
from club.domain.repository import TagRepository
from club.domain.service import TagService, normalize_tag_names
from club.domain.value import TagKind, TagName, UserId
from club.persistence.repository.inmemory import InMemoryStore, InMemoryTagRepository
from tests.conftest import make_user_tag, seed_system_tags
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestNormalizeTagNames:
    """Tests for normalize_tag_names."""

    def test_trims_lowercases_and_dedupes(self):
        names = normalize_tag_names(["Robotics ", "robotics", " ROBOTICS", "Arduino"])

        assert [n.root for n in names] == ["robotics", "arduino"]

    def test_drops_blank_names(self):
        names = normalize_tag_names(["", "   ", "ai"])

        assert [n.root for n in names] == ["ai"]

    def test_overlong_name_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            normalize_tag_names(["x" * 51])


class TestResolveTagSet:
    """Tests for resolve_tag_set."""

    @pytest.mark.asyncio
    async def test_creates_missing_user_tag_and_reuses_system_tag(self, unit_env):
        """Scenario: tags=["react", "robotics"], mainTag="robotics"."""
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        system = await seed_system_tags(repo)
        author = UserId(uuid4())

        resolved = await service.resolve_tag_set(["react", "robotics"], "robotics", author)

        assert len(resolved.tags) == 2
        assert resolved.main_tag.id == system["robotics"].id
        react = resolved.tags[0]
        assert react.name.root == "react"
        assert react.kind == TagKind.USER
        assert react.created_by == author

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await seed_system_tags(repo)
        author = UserId(uuid4())

        first = await service.resolve_tag_set(["servo", "robotics"], "robotics", author)
        second = await service.resolve_tag_set(["servo", "robotics"], "robotics", author)

        assert first.tag_ids == second.tag_ids
        assert await repo.count(kind=TagKind.USER) == 1

    @pytest.mark.asyncio
    async def test_case_and_whitespace_variants_resolve_to_one_tag(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        system = await seed_system_tags(repo)

        resolved = await service.resolve_tag_set(
            ["Robotics ", "robotics", " ROBOTICS"], "ROBOTICS", UserId(uuid4())
        )

        assert resolved.tag_ids == [system["robotics"].id]

    @pytest.mark.asyncio
    async def test_main_tag_is_appended_when_not_requested(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        system = await seed_system_tags(repo)

        resolved = await service.resolve_tag_set(["lidar"], "electronics", UserId(uuid4()))

        assert resolved.main_tag_id in resolved.tag_ids
        assert resolved.tag_ids[-1] == system["electronics"].id

    @pytest.mark.asyncio
    async def test_existing_user_tag_is_reused_not_duplicated(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await seed_system_tags(repo)
        owner = UserId(uuid4())
        existing = await repo.save(make_user_tag("rust", owner))

        resolved = await service.resolve_tag_set(["rust"], "programming", UserId(uuid4()))

        assert existing.id in resolved.tag_ids
        assert await repo.count(kind=TagKind.USER) == 1

    @pytest.mark.asyncio
    async def test_empty_tags_rejected(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await seed_system_tags(repo)

        with pytest.raises(EmptyTagSetError):
            await service.resolve_tag_set(["  ", ""], "robotics", UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_user_only_main_tag_rejected_without_creating_tags(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await seed_system_tags(repo)
        await repo.save(make_user_tag("drones", UserId(uuid4())))

        with pytest.raises(InvalidMainTagError):
            await service.resolve_tag_set(["brand-new", "drones"], "drones", UserId(uuid4()))

        assert await repo.find_by_name(TagName("brand-new")) is None

    @pytest.mark.asyncio
    async def test_main_tag_accepted_once_system_tag_exists(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await repo.save(make_user_tag("drones", UserId(uuid4())))

        with pytest.raises(InvalidMainTagError):
            await service.resolve_tag_set(["drones"], "drones", UserId(uuid4()))

        system = await service.create_system_tag("drones")
        resolved = await service.resolve_tag_set(["drones"], "drones", UserId(uuid4()))

        assert resolved.main_tag.id == system.id
        # SYSTEM wins over the USER tag with the same name
        assert resolved.tag_ids == [system.id]

    @pytest.mark.asyncio
    async def test_blank_main_tag_rejected(self, unit_env):
        service = await unit_env.get(TagService)

        with pytest.raises(InvalidMainTagError):
            await service.resolve_tag_set(["robotics"], "   ", UserId(uuid4()))


class _RacingTagRepository(InMemoryTagRepository):
    """Lets another writer create a USER tag between lookup and insert."""

    def __init__(self, store: InMemoryStore, rival: Tag) -> None:
        super().__init__(store)
        self.rival = rival
        self.raced = False

    async def save(self, tag: Tag) -> Tag:
        if not self.raced and tag.name == self.rival.name:
            self.raced = True
            await super().save(self.rival)
        return await super().save(tag)


class TestConcurrentCreation:
    """USER tag uniqueness races."""

    @pytest.mark.asyncio
    async def test_conflict_reuses_the_winning_tag(self):
        store = InMemoryStore()
        rival = make_user_tag("gearbox", UserId(uuid4()))
        repo = _RacingTagRepository(store, rival)
        service = TagService(tag_repository=repo)
        await seed_system_tags(repo)

        resolved = await service.resolve_tag_set(["gearbox"], "robotics", UserId(uuid4()))

        assert rival.id in resolved.tag_ids
        assert await repo.count(kind=TagKind.USER) == 1


class TestCreateSystemTag:
    """Tests for create_system_tag."""

    @pytest.mark.asyncio
    async def test_normalizes_name(self, unit_env):
        service = await unit_env.get(TagService)

        tag = await service.create_system_tag("  Machine-Learning ")

        assert tag.name.root == "machine-learning"
        assert tag.kind == TagKind.SYSTEM
        assert tag.created_by is None

    @pytest.mark.asyncio
    async def test_duplicate_rejected(self, unit_env):
        service = await unit_env.get(TagService)
        await service.create_system_tag("events")

        with pytest.raises(TagConflictError):
            await service.create_system_tag("EVENTS")

    @pytest.mark.asyncio
    async def test_may_share_a_name_with_a_user_tag(self, unit_env):
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await repo.save(make_user_tag("cnc", UserId(uuid4())))

        tag = await service.create_system_tag("cnc")

        assert tag.is_system
        assert len(await service.find_tag_ids_by_name("CNC")) == 2


class TestFindTagIdsByName:
    @pytest.mark.asyncio
    async def test_matches_any_case(self, unit_env):
        await seed_system_tags(await unit_env.get(TagRepository))
        service = await unit_env.get(TagService)

        assert len(await service.find_tag_ids_by_name(" Robotics ")) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "x" * 51])
    async def test_unusable_name_matches_nothing(self, unit_env, name):
        """A name no tag could have is an empty filter, not an error."""
        await seed_system_tags(await unit_env.get(TagRepository))
        service = await unit_env.get(TagService)

        assert await service.find_tag_ids_by_name(name) == []
