"""Dependency injection module."""

from typing import Type

from club.util.di.application import ProdApplicationProvider
from club.util.di.base import Component, ProviderBase
from club.util.di.core import ProdConfigProvider
from club.util.di.domain import ProdDomainProvider
from club.util.di.infrastructure import (
    ImagesProvider,
    MailerProvider,
    PersistenceProvider,
    ProdImagesProvider,
    ProdMailerProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Always real
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable components
    PersistenceProvider,
    ImagesProvider,
    MailerProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Providers without a ``__mock_component__`` are concrete and returned
    as-is. For a mockable component the subclass whose ``__is_mock__``
    matches ``use_mock`` is returned; mock subclasses only exist once
    ``tests.di`` has been imported.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "ImagesProvider",
    "MailerProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdImagesProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
]
