"""Mock DNS providers for testing."""

from dishka import Scope, provide

from kiiaren.adapter.dns import MockTxtResolver
from kiiaren.domain.service import TxtRecordResolver
from kiiaren.util.di.infrastructure.dns import DnsProvider


class MockDnsProvider(DnsProvider):
    """Mock DNS provider serving TXT records from memory.

    The resolver is also exposed under its concrete type so tests can
    publish records with ``set_records``.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_txt_resolver(self) -> MockTxtResolver:
        """Provide the in-memory resolver."""
        return MockTxtResolver()

    @provide(scope=Scope.APP)
    def get_txt_resolver(self, resolver: MockTxtResolver) -> TxtRecordResolver:
        """Provide the in-memory resolver as the verification port."""
        return resolver
