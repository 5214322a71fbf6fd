"""Check email domain use case."""

from uuid import UUID

from pydantic import BaseModel

from kiiaren.domain.service import DomainClaimService
from kiiaren.domain.value import WorkspaceId


class CheckEmailDomainRequest(BaseModel):
    """Check email domain request."""

    workspace_id: str
    email: str


class CheckEmailDomainResponse(BaseModel):
    """Whether the workspace has verified the email's domain."""

    verified: bool
    domain: str | None = None
    domain_id: str | None = None


class CheckEmailDomainUseCase:
    """Use case for the public "can this email auto-join?" check."""

    def __init__(self, domain_claim_service: DomainClaimService) -> None:
        self.domain_claim_service = domain_claim_service

    async def execute(
        self, request: CheckEmailDomainRequest
    ) -> CheckEmailDomainResponse:
        claim = await self.domain_claim_service.check_email_domain(
            WorkspaceId(UUID(request.workspace_id)), request.email
        )
        if claim is None:
            return CheckEmailDomainResponse(verified=False)
        return CheckEmailDomainResponse(
            verified=True, domain=claim.domain.root, domain_id=str(claim.id)
        )
