"""Dependency injection module."""

from typing import Type

from menumaster.util.di.application import ProdApplicationProvider
from menumaster.util.di.base import Component, ProviderBase
from menumaster.util.di.core import ProdConfigProvider
from menumaster.util.di.domain import ProdDomainProvider
from menumaster.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStripeProvider,
    StripeProvider,
)
from menumaster.util.error import ConfigurationError

# Layer providers first, then the swappable infrastructure components
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    StripeProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class that should be instantiated.

    Entries without subclasses are concrete and returned unchanged. Entries
    with subclasses are components; the subclass whose ``__is_mock__`` flag
    matches ``use_mock`` is returned.

    Raises:
        ConfigurationError: If the component has no matching implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    component = getattr(base, "__mock_component__", base.__name__)
    kind = "mock" if use_mock else "production"
    raise ConfigurationError(f"Component {component!r} has no {kind} provider")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "StripeProvider",
    "PersistenceProvider",
    "ProdStripeProvider",
    "ProdPersistenceProvider",
]
