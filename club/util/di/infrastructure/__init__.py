"""Infrastructure providers."""

# Import bases
from .images import ImagesProvider
from .mailer import MailerProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .images import ProdImagesProvider  # noqa: F401
from .mailer import ProdMailerProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ImagesProvider",
    "MailerProvider",
    "PersistenceProvider",
    "ProdImagesProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
]
