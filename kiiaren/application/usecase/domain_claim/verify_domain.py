"""Verify domain use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.application.usecase.domain_claim.items import DomainClaimItem
from kiiaren.domain.service import AccessService, DomainClaimService
from kiiaren.domain.value import DomainClaimId, UserId


class VerifyDomainRequest(BaseModel):
    """Verify domain request."""

    domain_id: str
    requester_id: str  # User ID from auth


class VerifyDomainResponse(BaseModel):
    """Verify domain response.

    ``success`` False is a normal outcome; ``error`` says what DNS returned.
    """

    success: bool
    domain: DomainClaimItem
    error: str | None = None
    records_found: list[str] = []


class VerifyDomainUseCase(BaseUseCase):
    """Use case for checking a claim's DNS challenge record (admins only)."""

    def __init__(
        self,
        access_service: AccessService,
        domain_claim_service: DomainClaimService,
    ) -> None:
        """Initialize verify domain use case.

        Args:
            access_service: Access control service
            domain_claim_service: Domain claim service
        """
        self.access_service = access_service
        self.domain_claim_service = domain_claim_service

    async def execute(self, request: VerifyDomainRequest) -> VerifyDomainResponse:
        """Execute verify domain flow.

        Args:
            request: Verify domain request

        Returns:
            Verification outcome

        Raises:
            DomainNotFoundError: If the claim does not exist
            NotWorkspaceMemberError: If requester is not a member
            NotWorkspaceAdminError: If requester is not an admin
        """
        with logfire.span(
            "verify_domain.execute",
            domain_id=request.domain_id,
            requester_id=request.requester_id,
        ):
            domain_id = DomainClaimId(UUID(request.domain_id))
            requester_id = UserId(UUID(request.requester_id))

            claim = await self.domain_claim_service.get_domain(domain_id)
            await self.access_service.require_admin(claim.workspace_id, requester_id)

            result = await self.domain_claim_service.verify_domain(domain_id)
            return VerifyDomainResponse(
                success=result.success,
                domain=DomainClaimItem.from_claim(result.domain),
                error=result.error,
                records_found=result.records_found,
            )
