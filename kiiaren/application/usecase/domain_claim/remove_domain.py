"""Remove domain use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.domain.service import AccessService, DomainClaimService
from kiiaren.domain.value import DomainClaimId, UserId


class RemoveDomainRequest(BaseModel):
    """Remove domain request."""

    domain_id: str
    requester_id: str  # User ID from auth


class RemoveDomainResponse(BaseModel):
    """Remove domain response."""

    success: bool
    domain_id: str
    domain: str


class RemoveDomainUseCase(BaseUseCase):
    """Use case for deleting a domain claim (admins only)."""

    def __init__(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> None:
        self.access_service = access_service
        self.domain_claim_service = domain_claim_service

    async def execute(self, request: RemoveDomainRequest) -> RemoveDomainResponse:
        """Execute remove domain flow.

        Raises:
            DomainNotFoundError: If the claim does not exist
            NotWorkspaceMemberError: If requester is not a member
            NotWorkspaceAdminError: If requester is not an admin
        """
        with logfire.span(
            "remove_domain.execute",
            domain_id=request.domain_id,
            requester_id=request.requester_id,
        ):
            domain_id = DomainClaimId(UUID(request.domain_id))
            requester_id = UserId(UUID(request.requester_id))

            claim = await self.domain_claim_service.get_domain(domain_id)
            await self.access_service.require_admin(claim.workspace_id, requester_id)

            removed = await self.domain_claim_service.remove_domain(domain_id)
            return RemoveDomainResponse(
                success=True, domain_id=str(removed.id), domain=removed.domain.root
            )
