"""Application layer DI providers."""

from dishka import Scope, provide

from kiiaren.application.usecase.domain_claim import (
    AddDomainUseCase,
    CheckEmailDomainUseCase,
    GetVerificationInstructionsUseCase,
    ListDomainsUseCase,
    RemoveDomainUseCase,
    VerifyDomainUseCase,
)
from kiiaren.application.usecase.invite_link import (
    CreateInviteLinkUseCase,
    GetInviteLinkUseCase,
    ListInviteLinksUseCase,
    RedeemInviteLinkUseCase,
    RevokeInviteLinkUseCase,
    ValidateInviteLinkUseCase,
)
from kiiaren.application.usecase.workspace import (
    AutoJoinUseCase,
    CreateWorkspaceUseCase,
    JoinWorkspaceUseCase,
)
from kiiaren.config import Settings
from kiiaren.domain.service import (
    AccessService,
    DomainClaimService,
    InviteLinkService,
    WorkspaceService,
)
from kiiaren.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Workspace use cases
    @provide
    def get_create_workspace_use_case(
        self, workspace_service: WorkspaceService
    ) -> CreateWorkspaceUseCase:
        """Provide create workspace use case."""
        return CreateWorkspaceUseCase(workspace_service=workspace_service)

    @provide
    def get_join_workspace_use_case(
        self, workspace_service: WorkspaceService
    ) -> JoinWorkspaceUseCase:
        """Provide join workspace use case."""
        return JoinWorkspaceUseCase(workspace_service=workspace_service)

    @provide
    def get_auto_join_use_case(
        self,
        workspace_service: WorkspaceService,
        domain_claim_service: DomainClaimService,
    ) -> AutoJoinUseCase:
        """Provide auto-join use case."""
        return AutoJoinUseCase(
            workspace_service=workspace_service,
            domain_claim_service=domain_claim_service,
        )

    # Domain claim use cases
    @provide
    def get_add_domain_use_case(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> AddDomainUseCase:
        """Provide add domain use case."""
        return AddDomainUseCase(
            access_service=access_service,
            domain_claim_service=domain_claim_service,
        )

    @provide
    def get_verify_domain_use_case(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> VerifyDomainUseCase:
        """Provide verify domain use case."""
        return VerifyDomainUseCase(
            access_service=access_service,
            domain_claim_service=domain_claim_service,
        )

    @provide
    def get_list_domains_use_case(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> ListDomainsUseCase:
        """Provide list domains use case."""
        return ListDomainsUseCase(
            access_service=access_service,
            domain_claim_service=domain_claim_service,
        )

    @provide
    def get_remove_domain_use_case(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> RemoveDomainUseCase:
        """Provide remove domain use case."""
        return RemoveDomainUseCase(
            access_service=access_service,
            domain_claim_service=domain_claim_service,
        )

    @provide
    def get_check_email_domain_use_case(
        self, domain_claim_service: DomainClaimService
    ) -> CheckEmailDomainUseCase:
        """Provide check email domain use case."""
        return CheckEmailDomainUseCase(domain_claim_service=domain_claim_service)

    @provide
    def get_verification_instructions_use_case(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> GetVerificationInstructionsUseCase:
        """Provide verification instructions use case."""
        return GetVerificationInstructionsUseCase(
            access_service=access_service,
            domain_claim_service=domain_claim_service,
        )

    # Invite link use cases
    @provide
    def get_create_invite_link_use_case(
        self,
        access_service: AccessService,
        invite_link_service: InviteLinkService,
        settings: Settings,
    ) -> CreateInviteLinkUseCase:
        """Provide create invite link use case."""
        return CreateInviteLinkUseCase(
            access_service=access_service,
            invite_link_service=invite_link_service,
            settings=settings,
        )

    @provide
    def get_invite_link_use_case(
        self, invite_link_service: InviteLinkService, settings: Settings
    ) -> GetInviteLinkUseCase:
        """Provide get invite link use case."""
        return GetInviteLinkUseCase(
            invite_link_service=invite_link_service, settings=settings
        )

    @provide
    def get_validate_invite_link_use_case(
        self, invite_link_service: InviteLinkService
    ) -> ValidateInviteLinkUseCase:
        """Provide validate invite link use case."""
        return ValidateInviteLinkUseCase(invite_link_service=invite_link_service)

    @provide
    def get_redeem_invite_link_use_case(
        self, invite_link_service: InviteLinkService
    ) -> RedeemInviteLinkUseCase:
        """Provide redeem invite link use case."""
        return RedeemInviteLinkUseCase(invite_link_service=invite_link_service)

    @provide
    def get_list_invite_links_use_case(
        self,
        access_service: AccessService,
        invite_link_service: InviteLinkService,
        settings: Settings,
    ) -> ListInviteLinksUseCase:
        """Provide list invite links use case."""
        return ListInviteLinksUseCase(
            access_service=access_service,
            invite_link_service=invite_link_service,
            settings=settings,
        )

    @provide
    def get_revoke_invite_link_use_case(
        self,
        access_service: AccessService,
        invite_link_service: InviteLinkService,
        settings: Settings,
    ) -> RevokeInviteLinkUseCase:
        """Provide revoke invite link use case."""
        return RevokeInviteLinkUseCase(
            access_service=access_service,
            invite_link_service=invite_link_service,
            settings=settings,
        )
