"""Dependency injection module.

Every provider class is listed once in PROVIDERS. Concrete providers are
used as they are. A provider with subclasses is a mockable component: one
subclass is the production implementation and another, flagged with
`__is_mock__ = True`, replaces it in tests.
"""

from typing import Type

from icebreaker.util.di.application import ProdApplicationProvider
from icebreaker.util.di.base import Component, ProviderBase
from icebreaker.util.di.core import ProdConfigProvider
from icebreaker.util.di.domain import ProdDomainProvider
from icebreaker.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    RepositoryProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    RepositoryProvider,
    # Mockable
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for `base`.

    Args:
        base: Provider class listed in PROVIDERS
        use_mock: Select the mock implementation of a mockable component

    Returns:
        `base` itself when it has no subclasses, else the matching subclass

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = {
        getattr(sub, "__is_mock__", False): sub for sub in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = getattr(base, "__mock_component__", None) or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "RepositoryProvider",
    "get_provider",
]
