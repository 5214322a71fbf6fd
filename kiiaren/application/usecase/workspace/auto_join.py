"""Auto-join by email domain use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.domain.service import DomainClaimService, WorkspaceService
from kiiaren.domain.value import AutoJoinFailureReason, UserId, WorkspaceId


class AutoJoinRequest(BaseModel):
    """Auto-join request."""

    workspace_id: str
    user_id: str  # User ID from auth
    email: str | None  # Verified email from auth


class AutoJoinResponse(BaseModel):
    """Auto-join response."""

    success: bool
    workspace_id: str
    member_id: str | None = None
    reason: AutoJoinFailureReason | None = None


class AutoJoinUseCase(BaseUseCase):
    """Use case for joining a workspace that has verified the user's
    email domain.
    """

    def __init__(
        self,
        workspace_service: WorkspaceService,
        domain_claim_service: DomainClaimService,
    ) -> None:
        """Initialize auto-join use case.

        Args:
            workspace_service: Workspace service
            domain_claim_service: Domain claim service
        """
        self.workspace_service = workspace_service
        self.domain_claim_service = domain_claim_service

    async def execute(self, request: AutoJoinRequest) -> AutoJoinResponse:
        """Execute auto-join flow.

        Args:
            request: Auto-join request

        Returns:
            Auto-join outcome

        Raises:
            WorkspaceNotFoundError: If the workspace does not exist
        """
        with logfire.span(
            "auto_join.execute",
            workspace_id=request.workspace_id,
            user_id=request.user_id,
        ):
            workspace_id = WorkspaceId(UUID(request.workspace_id))
            user_id = UserId(UUID(request.user_id))

            await self.workspace_service.get_workspace(workspace_id)

            verified_claim = (
                await self.domain_claim_service.check_email_domain(
                    workspace_id, request.email
                )
                if request.email
                else None
            )

            result = await self.workspace_service.auto_join(
                workspace_id, user_id, verified_claim
            )
            return AutoJoinResponse(
                success=result.success,
                workspace_id=str(result.workspace_id),
                member_id=str(result.member.id) if result.member else None,
                reason=result.reason,
            )
