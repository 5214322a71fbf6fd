"""Revoke invite link use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.application.usecase.invite_link.items import InviteLinkItem
from kiiaren.config import Settings
from kiiaren.domain.service import AccessService, InviteLinkService
from kiiaren.domain.value import InviteLinkId, UserId


class RevokeInviteLinkRequest(BaseModel):
    """Revoke invite link request."""

    invite_link_id: str
    requester_id: str  # User ID from auth


class RevokeInviteLinkResponse(BaseModel):
    """Revoke invite link response."""

    invite_link: InviteLinkItem


class RevokeInviteLinkUseCase(BaseUseCase):
    """Use case for revoking an invite link (admins of its workspace only)."""

    def __init__(
        self,
        access_service: AccessService,
        invite_link_service: InviteLinkService,
        settings: Settings,
    ) -> None:
        self.access_service = access_service
        self.invite_link_service = invite_link_service
        self.settings = settings

    async def execute(
        self, request: RevokeInviteLinkRequest
    ) -> RevokeInviteLinkResponse:
        """Execute revoke flow.

        Raises:
            InviteLinkNotFoundError: If the link does not exist
            NotWorkspaceMemberError: If requester is not a member
            NotWorkspaceAdminError: If requester is not an admin
        """
        with logfire.span(
            "revoke_invite_link.execute",
            invite_link_id=request.invite_link_id,
            requester_id=request.requester_id,
        ):
            invite_link_id = InviteLinkId(UUID(request.invite_link_id))
            requester_id = UserId(UUID(request.requester_id))

            invite_link = await self.invite_link_service.get_by_id(invite_link_id)
            await self.access_service.require_admin(
                invite_link.workspace_id, requester_id
            )

            revoked = await self.invite_link_service.revoke(invite_link_id)
            return RevokeInviteLinkResponse(
                invite_link=InviteLinkItem.from_invite_link(
                    revoked, self.settings.api.frontend_url
                )
            )
