"""Dependency injection wiring.

Providers come in two kinds. Concrete providers (config, domain,
application) are used as-is. Component providers (``broadcast``,
``google``, ``persistence``) are abstract bases carrying
``__mock_component__``; their subclasses are the interchangeable
implementations, told apart by ``__is_mock__``.
"""

from typing import Type

from tbn.util.di.application import ProdApplicationProvider
from tbn.util.di.base import Component, ProviderBase
from tbn.util.di.core import ProdConfigProvider
from tbn.util.di.domain import ProdDomainProvider
from tbn.util.di.infrastructure import (
    BroadcastProvider,
    GoogleProvider,
    PersistenceProvider,
    ProdBroadcastProvider,
    ProdGoogleProvider,
    ProdPersistenceProvider,
    VerifierAggregatorProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    BroadcastProvider,
    GoogleProvider,
    PersistenceProvider,
    VerifierAggregatorProvider,
]


def is_component(base: Type[ProviderBase]) -> bool:
    """A provider with implementations is a swappable component."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the mock implementation of a component

    Returns:
        ``base`` itself for concrete providers, else the matching subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not is_component(base):
        return base

    for impl in base.__subclasses__():
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    name = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(f"No {kind} implementation for {name}")


__all__ = [
    "BroadcastProvider",
    "Component",
    "GoogleProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdBroadcastProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "VerifierAggregatorProvider",
    "get_provider",
    "is_component",
]
