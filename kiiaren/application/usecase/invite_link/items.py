"""Invite link response items."""

from datetime import datetime, timezone

from pydantic import BaseModel

from kiiaren.domain.model import InviteLink
from kiiaren.domain.value import InviteLinkFailureReason, InviteLinkScopeType


class InviteLinkItem(BaseModel):
    """Invite link in responses.

    ``valid`` and ``unavailable_reason`` are evaluated at response time.
    """

    invite_link_id: str
    workspace_id: str
    code: str
    invite_url: str
    created_by: str
    created_at: datetime
    expires_at: datetime
    max_uses: int | None = None
    used_count: int
    scope_type: InviteLinkScopeType
    channel_id: str | None = None
    revoked_at: datetime | None = None
    valid: bool
    unavailable_reason: InviteLinkFailureReason | None = None

    @classmethod
    def from_invite_link(
        cls, invite_link: InviteLink, frontend_url: str
    ) -> "InviteLinkItem":
        reason = invite_link.unavailable_reason(datetime.now(timezone.utc))
        channel_id = invite_link.scope.channel_id
        return cls(
            invite_link_id=str(invite_link.id),
            workspace_id=str(invite_link.workspace_id),
            code=invite_link.code.root,
            invite_url=f"{frontend_url}/join/{invite_link.code.root}",
            created_by=str(invite_link.created_by),
            created_at=invite_link.created_at,
            expires_at=invite_link.expires_at,
            max_uses=invite_link.max_uses,
            used_count=invite_link.used_count,
            scope_type=invite_link.scope.type,
            channel_id=str(channel_id) if channel_id else None,
            revoked_at=invite_link.revoked_at,
            valid=reason is None,
            unavailable_reason=reason,
        )
