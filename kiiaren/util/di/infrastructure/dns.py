"""DNS resolver infrastructure providers."""

from dishka import Scope, provide
import logfire

from kiiaren.adapter.dns import DohTxtResolver, SystemTxtResolver
from kiiaren.config import DnsSettings
from kiiaren.domain.service import TxtRecordResolver
from kiiaren.util.di.base import ProviderBase


class DnsProvider(ProviderBase):
    """DNS component base."""

    __mock_component__ = "dns"


class ProdDnsProvider(DnsProvider):
    """Production DNS provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_txt_resolver(self, dns_settings: DnsSettings) -> TxtRecordResolver:
        """Provide the TXT resolver selected by ``dns.backend``."""
        logfire.info(
            "DNS resolver configured",
            backend=dns_settings.backend,
            resolver_url=dns_settings.resolver_url,
        )
        if dns_settings.backend == "system":
            return SystemTxtResolver(timeout=dns_settings.timeout_seconds)
        return DohTxtResolver(
            resolver_url=dns_settings.resolver_url,
            timeout=dns_settings.timeout_seconds,
        )
