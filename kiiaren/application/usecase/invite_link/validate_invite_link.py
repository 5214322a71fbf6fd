"""Validate invite link use case."""

import logfire
from pydantic import BaseModel

from kiiaren.domain.service import InviteLinkService
from kiiaren.domain.service.invite_link_service import FAILURE_MESSAGES
from kiiaren.domain.value import InviteLinkFailureReason, InviteLinkScopeType


class ValidateInviteLinkRequest(BaseModel):
    """Validate invite link request."""

    code: str


class ValidateInviteLinkResponse(BaseModel):
    """Validate invite link response."""

    valid: bool
    reason: InviteLinkFailureReason | None = None
    message: str | None = None
    workspace_id: str | None = None
    scope_type: InviteLinkScopeType | None = None
    channel_id: str | None = None


class ValidateInviteLinkUseCase:
    """Use case for previewing an invite link.

    This allows the frontend to show why a link is unusable before the user
    signs in. Membership is not checked here.
    """

    def __init__(self, invite_link_service: InviteLinkService) -> None:
        """Initialize validate invite link use case.

        Args:
            invite_link_service: Invite link service
        """
        self.invite_link_service = invite_link_service

    async def execute(
        self, request: ValidateInviteLinkRequest
    ) -> ValidateInviteLinkResponse:
        """Validate an invite code.

        Args:
            request: Validation request with code

        Returns:
            Validation response with the link's workspace or the reason
        """
        with logfire.span(
            "validate_invite_link.execute", code=request.code[:8] + "..."
        ):
            validation = await self.invite_link_service.validate(request.code)
            invite_link = validation.invite_link

            if invite_link is None:
                return ValidateInviteLinkResponse(
                    valid=False,
                    reason=validation.reason,
                    message=FAILURE_MESSAGES[InviteLinkFailureReason.NOT_FOUND],
                )

            channel_id = invite_link.scope.channel_id
            logfire.info(
                "Invite link validated",
                invite_link_id=str(invite_link.id),
                valid=validation.valid,
                reason=validation.reason.value if validation.reason else None,
            )
            return ValidateInviteLinkResponse(
                valid=validation.valid,
                reason=validation.reason,
                message=FAILURE_MESSAGES[validation.reason]
                if validation.reason
                else "Valid invite link",
                workspace_id=str(invite_link.workspace_id),
                scope_type=invite_link.scope.type,
                channel_id=str(channel_id) if channel_id else None,
            )
