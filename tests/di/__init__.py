"""Mock providers for testing."""

from .images import MockImagesProvider
from .mailer import MockMailerProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockImagesProvider",
    "MockMailerProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
