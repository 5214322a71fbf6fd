"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from kiiaren.config import AuthSettings, DnsSettings, InviteLinkSettings, Settings
from kiiaren.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_dns_settings(self, settings: Settings) -> DnsSettings:
        """Provide DNS resolver settings."""
        return settings.dns

    @provide(scope=Scope.APP)
    def provide_invite_link_settings(self, settings: Settings) -> InviteLinkSettings:
        """Provide invite link settings."""
        return settings.invite_links
