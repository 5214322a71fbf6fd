"""Mock providers for testing."""

from .dns import MockDnsProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockDnsProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
