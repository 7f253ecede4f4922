"""Password hashing utilities."""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password

    Returns:
        Salted bcrypt hash
    """
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash.

    Args:
        password: Plaintext password
        password_hash: Stored bcrypt hash

    Returns:
        True if the password matches
    """
    return pwd_context.verify(password, password_hash)
