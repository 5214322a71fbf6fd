"""Dependency injection module."""

from typing import Type

from kiiaren.util.di.application import ProdApplicationProvider
from kiiaren.util.di.base import Component, ProviderBase
from kiiaren.util.di.core import ProdConfigProvider
from kiiaren.util.di.domain import ProdDomainProvider
from kiiaren.util.di.infrastructure import (
    DnsProvider,
    PersistenceProvider,
    ProdDnsProvider,
    ProdPersistenceProvider,
)

# Plain providers are used as-is; mockable ones are resolved to a subclass
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    DnsProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Raises:
        ValueError: If a mockable component lacks the requested variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

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
    "DnsProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdDnsProvider",
    "ProdPersistenceProvider",
]
