"""List domains use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.domain_claim.items import DomainClaimItem
from kiiaren.domain.service import AccessService, DomainClaimService
from kiiaren.domain.value import UserId, WorkspaceId


class ListDomainsRequest(BaseModel):
    """List domains request."""

    workspace_id: str
    requester_id: str  # User ID from auth


class ListDomainsResponse(BaseModel):
    """List domains response."""

    domains: list[DomainClaimItem]


class ListDomainsUseCase:
    """Use case for listing a workspace's domain claims (admins only)."""

    def __init__(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> None:
        self.access_service = access_service
        self.domain_claim_service = domain_claim_service

    async def execute(self, request: ListDomainsRequest) -> ListDomainsResponse:
        """Execute list domains flow."""
        with logfire.span("list_domains.execute", workspace_id=request.workspace_id):
            workspace_id = WorkspaceId(UUID(request.workspace_id))
            requester_id = UserId(UUID(request.requester_id))

            await self.access_service.require_admin(workspace_id, requester_id)

            claims = await self.domain_claim_service.list_domains(workspace_id)
            return ListDomainsResponse(
                domains=[DomainClaimItem.from_claim(c) for c in claims]
            )
