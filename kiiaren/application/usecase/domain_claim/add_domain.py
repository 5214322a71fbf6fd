"""Add domain use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.application.usecase.domain_claim.items import DomainClaimItem
from kiiaren.domain.service import AccessService, DomainClaimService, parse_domain
from kiiaren.domain.value import UserId, WorkspaceId


class AddDomainRequest(BaseModel):
    """Add domain request."""

    workspace_id: str
    domain: str
    requester_id: str  # User ID from auth


class AddDomainResponse(BaseModel):
    """Add domain response."""

    domain: DomainClaimItem
    record_name: str
    record_value: str


class AddDomainUseCase(BaseUseCase):
    """Use case for claiming an email domain for a workspace (admins only)."""

    def __init__(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> None:
        """Initialize add domain use case.

        Args:
            access_service: Access control service
            domain_claim_service: Domain claim service
        """
        self.access_service = access_service
        self.domain_claim_service = domain_claim_service

    async def execute(self, request: AddDomainRequest) -> AddDomainResponse:
        """Execute add domain flow.

        Args:
            request: Add domain request

        Returns:
            The pending claim and the DNS record to publish

        Raises:
            NotWorkspaceMemberError: If requester is not a member
            NotWorkspaceAdminError: If requester is not an admin
            InvalidDomainError: If the domain is not a valid host name
            DomainAlreadyClaimedError: If the domain is already claimed
        """
        with logfire.span(
            "add_domain.execute",
            workspace_id=request.workspace_id,
            requester_id=request.requester_id,
        ):
            workspace_id = WorkspaceId(UUID(request.workspace_id))
            requester_id = UserId(UUID(request.requester_id))

            await self.access_service.require_admin(workspace_id, requester_id)

            domain = parse_domain(request.domain)
            claim = await self.domain_claim_service.add_domain(
                workspace_id, domain, requester_id
            )

            return AddDomainResponse(
                domain=DomainClaimItem.from_claim(claim),
                record_name=claim.domain.challenge_name,
                record_value=claim.verification_token.expected_record,
            )
