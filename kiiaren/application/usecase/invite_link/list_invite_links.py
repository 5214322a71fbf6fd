"""List invite links use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.invite_link.items import InviteLinkItem
from kiiaren.config import Settings
from kiiaren.domain.service import AccessService, InviteLinkService
from kiiaren.domain.value import UserId, WorkspaceId


class ListInviteLinksRequest(BaseModel):
    """List invite links request."""

    workspace_id: str
    requester_id: str  # User ID from auth


class ListInviteLinksResponse(BaseModel):
    """List invite links response."""

    invite_links: list[InviteLinkItem]
    total: int


class ListInviteLinksUseCase:
    """Use case for listing a workspace's invite links (admins only)."""

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
        self, request: ListInviteLinksRequest
    ) -> ListInviteLinksResponse:
        """Execute list flow.

        Returns:
            Every link of the workspace, newest first, including expired and
            revoked ones
        """
        with logfire.span(
            "list_invite_links.execute", workspace_id=request.workspace_id
        ):
            workspace_id = WorkspaceId(UUID(request.workspace_id))
            requester_id = UserId(UUID(request.requester_id))

            await self.access_service.require_admin(workspace_id, requester_id)

            invite_links = await self.invite_link_service.list_invite_links(
                workspace_id
            )
            frontend_url = self.settings.api.frontend_url
            items = [
                InviteLinkItem.from_invite_link(link, frontend_url)
                for link in invite_links
            ]
            return ListInviteLinksResponse(invite_links=items, total=len(items))
