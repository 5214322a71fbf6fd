"""Infrastructure providers."""

# Import bases
from .dns import DnsProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .dns import ProdDnsProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "DnsProvider",
    "PersistenceProvider",
    "ProdDnsProvider",
    "ProdPersistenceProvider",
]
