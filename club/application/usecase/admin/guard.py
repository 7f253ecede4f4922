"""Admin-only guard."""

import logfire

from club.domain.error import NotAuthorizedError
from club.domain.value import Identity


def require_admin(identity: Identity, resource: str) -> None:
    """Raise unless the requester is an admin.

    Raises:
        NotAuthorizedError: If the role is not admin
    """
    if not identity.is_admin:
        logfire.warn(
            "Admin route denied",
            resource=resource,
            user_id=str(identity.user_id),
            role=identity.role.value,
        )
        raise NotAuthorizedError(
            resource, None, str(identity.user_id), reason="admin only"
        )
