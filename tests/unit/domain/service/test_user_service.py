"""Unit tests for UserService."""

import pytest

from club.domain.error import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    NotAuthorizedError,
    ValidationError,
)
from club.domain.repository import UserRepository
from club.domain.service import UserService
from club.domain.value import MembershipStatus, Page, UserRole
from club.util.password import verify_password
from tests.conftest import PASSWORD, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    @pytest.mark.asyncio
    async def test_new_account_is_pending_user(self, unit_env):
        service = await unit_env.get(UserService)

        user = await service.register("ada", "  Ada@Example.COM ", "hunter22")

        assert user.role == UserRole.USER
        assert user.membership_status == MembershipStatus.PENDING
        assert user.membership_requested_at is not None
        assert user.email == "ada@example.com"
        assert user.password_hash != "hunter22"
        assert verify_password("hunter22", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_email_ignores_case(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("ada", "ada@example.com", "hunter22")

        with pytest.raises(EmailAlreadyRegisteredError):
            await service.register("ada2", "ADA@example.com", "hunter22")


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_valid_credentials(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await seed_user(repo, email="bob@example.com")

        authenticated = await service.authenticate("BOB@example.com", PASSWORD)

        assert authenticated.id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [("bob@example.com", "wrong-password"), ("nobody@example.com", PASSWORD)],
    )
    async def test_invalid_credentials(self, unit_env, email, password):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        await seed_user(repo, email="bob@example.com")

        with pytest.raises(AuthenticationError):
            await service.authenticate(email, password)


class TestProfile:
    @pytest.mark.asyncio
    async def test_update_fields(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await seed_user(repo)

        updated = await service.update_profile(user, username="newname", bio="Builds arms")

        assert updated.username == "newname"
        assert updated.bio == "Builds arms"
        assert updated.email == user.email

    @pytest.mark.asyncio
    async def test_nothing_to_update(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await seed_user(repo)

        with pytest.raises(ValidationError):
            await service.update_profile(user)

    @pytest.mark.asyncio
    async def test_email_taken_by_someone_else(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        await seed_user(repo, email="taken@example.com")
        user = await seed_user(repo)

        with pytest.raises(EmailAlreadyRegisteredError):
            await service.update_profile(user, email="Taken@example.com")

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await seed_user(repo)

        updated = await service.change_password(user, PASSWORD, "brand-new-pass")

        assert verify_password("brand-new-pass", updated.password_hash)
        with pytest.raises(ValidationError):
            await service.change_password(updated, PASSWORD, "another-pass")


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_member_may_delete_self(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await seed_user(repo)

        await service.delete_account(user)

        assert await repo.find_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_admin_cannot_be_deleted(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        admin = await seed_user(repo, role=UserRole.ADMIN)

        with pytest.raises(NotAuthorizedError):
            await service.delete_account(admin)


@pytest.mark.asyncio
async def test_list_users_filters_by_status(unit_env):
    service = await unit_env.get(UserService)
    repo = await unit_env.get(UserRepository)
    await seed_user(repo, role=UserRole.MEMBER)
    first = await seed_user(repo, role=UserRole.USER)
    second = await seed_user(repo, role=UserRole.USER)

    users, total = await service.list_users(
        Page(page=1, limit=10), membership_status=MembershipStatus.PENDING
    )

    assert total == 2
    assert [u.id for u in users] == [second.id, first.id]
    assert await service.count_users(role=UserRole.MEMBER) == 1
