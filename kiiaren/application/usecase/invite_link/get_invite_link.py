"""Get invite link by code use case."""

from pydantic import BaseModel

from kiiaren.application.usecase.invite_link.items import InviteLinkItem
from kiiaren.config import Settings
from kiiaren.domain.service import InviteLinkService


class GetInviteLinkRequest(BaseModel):
    """Get invite link request."""

    code: str


class GetInviteLinkResponse(BaseModel):
    """The stored link, or None. No validity filtering is applied."""

    invite_link: InviteLinkItem | None = None


class GetInviteLinkUseCase:
    """Use case for looking up an invite link by its code."""

    def __init__(
        self, invite_link_service: InviteLinkService, settings: Settings
    ) -> None:
        self.invite_link_service = invite_link_service
        self.settings = settings

    async def execute(self, request: GetInviteLinkRequest) -> GetInviteLinkResponse:
        invite_link = await self.invite_link_service.get_by_code(request.code)
        if invite_link is None:
            return GetInviteLinkResponse()
        return GetInviteLinkResponse(
            invite_link=InviteLinkItem.from_invite_link(
                invite_link, self.settings.api.frontend_url
            )
        )
