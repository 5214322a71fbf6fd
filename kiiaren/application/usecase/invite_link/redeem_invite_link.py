"""Redeem invite link use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.domain.service import InviteLinkService
from kiiaren.domain.value import InviteLinkFailureReason, UserId


class RedeemInviteLinkRequest(BaseModel):
    """Redeem invite link request."""

    code: str
    user_id: str  # User ID from auth


class RedeemInviteLinkResponse(BaseModel):
    """Redeem invite link response.

    Business failures are reported through ``reason``, not HTTP errors.
    """

    success: bool
    workspace_id: str | None = None
    channel_id: str | None = None
    reason: InviteLinkFailureReason | None = None
    error: str | None = None


class RedeemInviteLinkUseCase(BaseUseCase):
    """Use case for joining a workspace through an invite link."""

    def __init__(self, invite_link_service: InviteLinkService) -> None:
        """Initialize redeem invite link use case.

        Args:
            invite_link_service: Invite link service
        """
        self.invite_link_service = invite_link_service

    async def execute(
        self, request: RedeemInviteLinkRequest
    ) -> RedeemInviteLinkResponse:
        """Execute redemption flow.

        Args:
            request: Redeem request

        Returns:
            Redemption outcome
        """
        with logfire.span(
            "redeem_invite_link.execute",
            code=request.code[:8] + "...",
            user_id=request.user_id,
        ):
            result = await self.invite_link_service.redeem(
                request.code, UserId(UUID(request.user_id))
            )
            return RedeemInviteLinkResponse(
                success=result.success,
                workspace_id=str(result.workspace_id) if result.workspace_id else None,
                channel_id=str(result.channel_id) if result.channel_id else None,
                reason=result.reason,
                error=result.error,
            )
