"""Domain layer DI providers."""

from dishka import Scope, provide

from kiiaren.config import AuthSettings, InviteLinkSettings
from kiiaren.domain.repository import (
    DomainClaimRepository,
    InviteLinkRepository,
    MemberRepository,
    WorkspaceRepository,
)
from kiiaren.domain.service import (
    AccessService,
    DomainClaimService,
    InviteLinkService,
    JWTService,
    TxtRecordResolver,
    WorkspaceService,
)
from kiiaren.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_service(self, member_repository: MemberRepository) -> AccessService:
        """Provide workspace access control service."""
        return AccessService(member_repository=member_repository)

    @provide
    def get_workspace_service(
        self,
        workspace_repository: WorkspaceRepository,
        member_repository: MemberRepository,
    ) -> WorkspaceService:
        """Provide workspace domain service."""
        return WorkspaceService(
            workspace_repository=workspace_repository,
            member_repository=member_repository,
        )

    @provide
    def get_domain_claim_service(
        self,
        domain_claim_repository: DomainClaimRepository,
        workspace_repository: WorkspaceRepository,
        txt_resolver: TxtRecordResolver,
    ) -> DomainClaimService:
        """Provide domain claim (DNS verification) service."""
        return DomainClaimService(
            domain_claim_repository=domain_claim_repository,
            workspace_repository=workspace_repository,
            txt_resolver=txt_resolver,
        )

    @provide
    def get_invite_link_service(
        self,
        invite_link_repository: InviteLinkRepository,
        member_repository: MemberRepository,
        invite_link_settings: InviteLinkSettings,
    ) -> InviteLinkService:
        """Provide invite link domain service."""
        return InviteLinkService(
            invite_link_repository=invite_link_repository,
            member_repository=member_repository,
            default_expires_in_hours=invite_link_settings.default_expires_in_hours,
        )
