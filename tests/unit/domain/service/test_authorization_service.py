"""Unit tests for AuthorizationService."""

from uuid import uuid4

import pytest

from club.domain.error import NotAuthorizedError
from club.domain.service import (
    COMMENT_POLICY,
    POST_POLICY,
    PROJECT_POLICY,
    Action,
    AuthorizationService,
    is_owner_or_admin,
)
from club.domain.value import Identity, MembershipStatus, UserId, UserRole


def identity(role: UserRole) -> Identity:
    status = MembershipStatus.PENDING if role == UserRole.USER else MembershipStatus.APPROVED
    return Identity(user_id=UserId(uuid4()), role=role, membership_status=status)


@pytest.fixture
def authz() -> AuthorizationService:
    return AuthorizationService()


class TestCreate:
    @pytest.mark.parametrize(
        "policy,role,allowed",
        [
            (POST_POLICY, UserRole.ADMIN, True),
            (POST_POLICY, UserRole.MEMBER, False),
            (POST_POLICY, UserRole.USER, False),
            (PROJECT_POLICY, UserRole.ADMIN, True),
            (PROJECT_POLICY, UserRole.MEMBER, True),
            (PROJECT_POLICY, UserRole.USER, False),
            (COMMENT_POLICY, UserRole.MEMBER, True),
            (COMMENT_POLICY, UserRole.USER, False),
        ],
    )
    def test_create_roles(self, authz, policy, role, allowed):
        decision = authz.decide(identity(role), Action.CREATE, policy)

        assert decision.allowed is allowed


class TestMutate:
    def test_project_author_may_update(self, authz):
        author = identity(UserRole.MEMBER)

        decision = authz.decide(
            author, Action.UPDATE, PROJECT_POLICY, author_id=author.user_id
        )

        assert decision.allowed

    def test_other_member_may_not_delete_project(self, authz):
        other = identity(UserRole.MEMBER)

        with pytest.raises(NotAuthorizedError) as exc_info:
            authz.require(
                other,
                Action.DELETE,
                PROJECT_POLICY,
                resource_id="p1",
                author_id=UserId(uuid4()),
            )

        assert exc_info.value.resource == "Project"
        assert exc_info.value.code == "Forbidden"

    def test_admin_may_mutate_anything(self, authz):
        admin = identity(UserRole.ADMIN)

        for policy in (POST_POLICY, PROJECT_POLICY, COMMENT_POLICY):
            decision = authz.decide(
                admin, Action.DELETE, policy, author_id=UserId(uuid4())
            )
            assert decision.allowed

    def test_post_author_without_admin_role_may_not_update(self, authz):
        # A demoted author loses control of their posts
        former_admin = identity(UserRole.MEMBER)

        decision = authz.decide(
            former_admin, Action.UPDATE, POST_POLICY, author_id=former_admin.user_id
        )

        assert not decision.allowed
        assert decision.reason

    def test_anyone_authenticated_may_read(self, authz):
        decision = authz.decide(identity(UserRole.USER), Action.READ, POST_POLICY)

        assert decision.allowed


def test_is_owner_or_admin():
    member = identity(UserRole.MEMBER)

    assert is_owner_or_admin(member, member.user_id)
    assert not is_owner_or_admin(member, UserId(uuid4()))
    assert not is_owner_or_admin(member, None)
    assert is_owner_or_admin(identity(UserRole.ADMIN), UserId(uuid4()))
