"""Encoding and decoding of access tokens with PyJWT."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from club.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "sub"]


class TokenPayload(BaseModel):
    """Claims carried by an access token.

    Role and membership status are a snapshot taken when the token was
    issued.
    """

    user_id: str
    role: str
    membership_status: str
    exp: datetime


class JWTError(Exception):
    """Token could not be accepted."""


def create_token(
    user_id: str, role: str, membership_status: str, settings: AuthSettings
) -> str:
    """Issue a signed token valid for ``settings.jwt_expiry_minutes``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "role": role,
        "membership_status": membership_status,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.jwt_expiry_minutes),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry and return the claims.

    Raises:
        JWTError: If the token is expired, tampered with, or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(
            user_id=claims["sub"],
            role=claims.get("role", ""),
            membership_status=claims.get("membership_status", ""),
            exp=claims["exp"],
        )
    except ValidationError:
        raise JWTError("Invalid token")
