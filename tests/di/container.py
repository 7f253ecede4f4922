"""Test container with per-component mock selection."""

from dishka import AsyncContainer, Provider, make_async_container

from club.util.di import PROVIDERS, Component, get_provider
from club.util.di.base import ProviderBase


def _mockable() -> list[type[ProviderBase]]:
    return [base for base in PROVIDERS if base.__mock_component__ is not None]


def build_test_container(
    unmock: set[Component] | None = None, *extra_providers: Provider
) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Args:
        unmock: Components that should use their production provider
        extra_providers: Additional providers, e.g. ``FastapiProvider`` for
            containers driving the HTTP app

    Raises:
        ValueError: If ``unmock`` names an unknown component or leaves a
            dependency of an unmocked component mocked

    Examples:
        container = build_test_container()
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, *extra_providers)


def _validate_unmock(unmock: set[Component]) -> None:
    known = {base.__mock_component__ for base in _mockable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    for base in _mockable():
        if base.__mock_component__ not in unmock:
            continue
        missing = base.__depends_on__ - unmock
        if missing:
            raise ValueError(
                f"Component '{base.__mock_component__}' requires "
                f"{sorted(missing)} to be unmocked"
            )
