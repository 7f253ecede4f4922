"""Ownership and role authorization.

Policies are plain data; one predicate decides every mutation on posts,
projects and comments.
"""

from enum import Enum
from typing import Optional

import logfire

from club.domain.error import NotAuthorizedError
from club.domain.value import Identity, UserId, UserRole
from club.domain.value.common import ValueObject

from .base import Service


class Action(str, Enum):
    """Operation being authorized."""

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class AccessPolicy(ValueObject):
    """Who may create and who may mutate one kind of resource.

    Attributes:
        resource: Resource name used in errors and logs
        create_roles: Roles allowed to create
        mutate_roles: Roles allowed to update or delete any instance
        owner_may_mutate: Whether the author may update or delete their own
    """

    resource: str
    create_roles: frozenset[UserRole]
    mutate_roles: frozenset[UserRole] = frozenset({UserRole.ADMIN})
    owner_may_mutate: bool = False


class AuthorizationDecision(ValueObject):
    """Outcome of an authorization check."""

    allowed: bool
    reason: Optional[str] = None


POST_POLICY = AccessPolicy(
    resource="Post",
    create_roles=frozenset({UserRole.ADMIN}),
    owner_may_mutate=False,
)

PROJECT_POLICY = AccessPolicy(
    resource="Project",
    create_roles=frozenset({UserRole.MEMBER, UserRole.ADMIN}),
    owner_may_mutate=True,
)

COMMENT_POLICY = AccessPolicy(
    resource="Comment",
    create_roles=frozenset({UserRole.MEMBER, UserRole.ADMIN}),
    owner_may_mutate=True,
)


def is_owner_or_admin(requester: Identity, author_id: Optional[UserId]) -> bool:
    """True if the requester is an admin or authored the resource."""
    return requester.is_admin or (
        author_id is not None and requester.user_id == author_id
    )


class AuthorizationService(Service):
    """Domain service applying access policies to identities."""

    def decide(
        self,
        requester: Identity,
        action: Action,
        policy: AccessPolicy,
        author_id: Optional[UserId] = None,
    ) -> AuthorizationDecision:
        """Decide whether ``requester`` may perform ``action``.

        Args:
            requester: Authenticated identity
            action: Operation being attempted
            policy: Policy of the target resource kind
            author_id: Author of the target, for update and delete

        Returns:
            Decision with a reason when denied
        """
        if action == Action.READ:
            return AuthorizationDecision(allowed=True)

        if action == Action.CREATE:
            if requester.role in policy.create_roles:
                return AuthorizationDecision(allowed=True)
            return AuthorizationDecision(
                allowed=False,
                reason=f"role {requester.role.value} may not create {policy.resource}",
            )

        if requester.role in policy.mutate_roles:
            return AuthorizationDecision(allowed=True)
        if policy.owner_may_mutate and is_owner_or_admin(requester, author_id):
            return AuthorizationDecision(allowed=True)
        return AuthorizationDecision(
            allowed=False,
            reason=f"only the author or an admin may {action.value} this {policy.resource}",
        )

    def require(
        self,
        requester: Identity,
        action: Action,
        policy: AccessPolicy,
        resource_id: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> None:
        """Raise unless ``requester`` may perform ``action``.

        Raises:
            NotAuthorizedError: If the policy denies the action
        """
        decision = self.decide(requester, action, policy, author_id=author_id)
        if not decision.allowed:
            logfire.warn(
                "Authorization denied",
                resource=policy.resource,
                resource_id=resource_id,
                action=action.value,
                user_id=str(requester.user_id),
                role=requester.role.value,
                reason=decision.reason,
            )
            raise NotAuthorizedError(
                policy.resource,
                resource_id,
                str(requester.user_id),
                reason=decision.reason,
            )
