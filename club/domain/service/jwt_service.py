"""JWT token domain service."""

from uuid import UUID

import logfire

from club.config import AuthSettings
from club.domain.error import AuthenticationError
from club.domain.model.user import User
from club.domain.value import Identity, MembershipStatus, UserId, UserRole
from club.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service

BEARER_PREFIX = "bearer "


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create JWT token for user.

        The token captures role and membership status at the time of issue.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(
                str(user.id),
                user.role.value,
                user.membership_status.value,
                self.auth_settings,
            )
            logfire.info("JWT token created", user_id=str(user.id), role=user.role.value)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def authenticate(self, authorization: str | None) -> Identity:
        """Turn an ``Authorization`` header into an identity.

        Args:
            authorization: Raw header value, expected as ``Bearer <token>``

        Returns:
            Identity asserted by the token

        Raises:
            AuthenticationError: If the header is missing, malformed, or the
                token is invalid or expired
        """
        if not authorization:
            raise AuthenticationError("Not authenticated")
        if not authorization.lower().startswith(BEARER_PREFIX):
            raise AuthenticationError("Authorization header must use Bearer scheme")

        token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            raise AuthenticationError("Not authenticated")

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            raise AuthenticationError(str(e))

        try:
            return Identity(
                user_id=UserId(UUID(payload.user_id)),
                role=UserRole(payload.role),
                membership_status=MembershipStatus(payload.membership_status),
            )
        except ValueError:
            raise AuthenticationError("Invalid token")
