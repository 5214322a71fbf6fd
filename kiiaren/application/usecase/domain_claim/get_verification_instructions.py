"""Get verification instructions use case."""

from uuid import UUID

from pydantic import BaseModel

from kiiaren.domain.service import AccessService, DomainClaimService
from kiiaren.domain.value import DomainClaimId, DomainStatus, UserId


class GetVerificationInstructionsRequest(BaseModel):
    """Get verification instructions request."""

    domain_id: str
    requester_id: str  # User ID from auth


class GetVerificationInstructionsResponse(BaseModel):
    """DNS record to publish, in the shape DNS providers ask for."""

    record_type: str
    record_name: str
    record_value: str
    domain: str
    status: DomainStatus


class GetVerificationInstructionsUseCase:
    """Use case for showing admins the TXT record of a claim."""

    def __init__(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> None:
        self.access_service = access_service
        self.domain_claim_service = domain_claim_service

    async def execute(
        self, request: GetVerificationInstructionsRequest
    ) -> GetVerificationInstructionsResponse:
        domain_id = DomainClaimId(UUID(request.domain_id))
        requester_id = UserId(UUID(request.requester_id))

        claim = await self.domain_claim_service.get_domain(domain_id)
        await self.access_service.require_admin(claim.workspace_id, requester_id)

        instructions = await self.domain_claim_service.get_verification_instructions(
            domain_id
        )
        return GetVerificationInstructionsResponse(
            record_type=instructions.record_type,
            record_name=instructions.record_name,
            record_value=instructions.record_value,
            domain=instructions.domain.root,
            status=instructions.status,
        )
