"""Create invite link use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.application.usecase.invite_link.items import InviteLinkItem
from kiiaren.config import Settings
from kiiaren.domain.error import ValidationError
from kiiaren.domain.service import AccessService, InviteLinkService
from kiiaren.domain.value import (
    ChannelId,
    InviteLinkScope,
    InviteLinkScopeType,
    UserId,
    WorkspaceId,
)


class CreateInviteLinkRequest(BaseModel):
    """Create invite link request."""

    workspace_id: str
    requester_id: str  # User ID from auth
    scope_type: InviteLinkScopeType = InviteLinkScopeType.WORKSPACE
    channel_id: str | None = None
    expires_in_hours: int | None = Field(default=None, gt=0)
    max_uses: int | None = Field(default=None, ge=1)


class CreateInviteLinkResponse(BaseModel):
    """Create invite link response."""

    invite_link: InviteLinkItem


class CreateInviteLinkUseCase(BaseUseCase):
    """Use case for issuing an invite link (admins only)."""

    def __init__(
        self,
        access_service: AccessService,
        invite_link_service: InviteLinkService,
        settings: Settings,
    ) -> None:
        """Initialize create invite link use case.

        Args:
            access_service: Access control service
            invite_link_service: Invite link service
            settings: Application settings (frontend URL)
        """
        self.access_service = access_service
        self.invite_link_service = invite_link_service
        self.settings = settings

    async def execute(
        self, request: CreateInviteLinkRequest
    ) -> CreateInviteLinkResponse:
        """Execute create invite link flow.

        Args:
            request: Create invite link request

        Returns:
            The new link with its shareable URL

        Raises:
            NotWorkspaceMemberError: If requester is not a member
            NotWorkspaceAdminError: If requester is not an admin
            ValidationError: If the scope is inconsistent
        """
        with logfire.span(
            "create_invite_link.execute",
            workspace_id=request.workspace_id,
            requester_id=request.requester_id,
            scope_type=request.scope_type.value,
        ):
            workspace_id = WorkspaceId(UUID(request.workspace_id))
            requester_id = UserId(UUID(request.requester_id))

            await self.access_service.require_admin(workspace_id, requester_id)

            try:
                scope = InviteLinkScope(
                    type=request.scope_type,
                    channel_id=ChannelId(UUID(request.channel_id))
                    if request.channel_id
                    else None,
                )
            except ValueError as e:
                raise ValidationError(f"Invalid invite link scope: {e}") from e

            invite_link = await self.invite_link_service.create_invite_link(
                workspace_id,
                requester_id,
                scope=scope,
                expires_in_hours=request.expires_in_hours,
                max_uses=request.max_uses,
            )
            return CreateInviteLinkResponse(
                invite_link=InviteLinkItem.from_invite_link(
                    invite_link, self.settings.api.frontend_url
                )
            )
