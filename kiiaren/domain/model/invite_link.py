"""Invite link entity.

Admin-issued admission tokens for users outside the verified email domain.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from kiiaren.domain.model.common import DomainModel
from kiiaren.domain.value import (
    InviteCode,
    InviteLinkFailureReason,
    InviteLinkId,
    InviteLinkScope,
    UserId,
    WorkspaceId,
)


class InviteLink(DomainModel):
    """Invite link entity.

    Business rules:
    - code is URL-safe and globally unique
    - used_count only grows, and never exceeds max_uses when that is set
    - revoked_at, once set, is permanent
    - links are never deleted (kept for audit)
    """

    id: InviteLinkId
    workspace_id: WorkspaceId
    code: InviteCode
    created_by: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    expires_at: datetime
    max_uses: Optional[int] = Field(default=None, ge=1)
    used_count: int = Field(default=0, ge=0)
    scope: InviteLinkScope = InviteLinkScope()
    revoked_at: Optional[datetime] = None

    def unavailable_reason(self, now: datetime) -> InviteLinkFailureReason | None:
        """Why the link cannot be redeemed at ``now``, or None if it can.

        Checks run in a fixed order so callers always report the same reason:
        revoked, then expired, then exhausted.
        """
        if self.revoked_at is not None:
            return InviteLinkFailureReason.REVOKED
        if now >= self.expires_at:
            return InviteLinkFailureReason.EXPIRED
        if self.max_uses is not None and self.used_count >= self.max_uses:
            return InviteLinkFailureReason.MAX_USES
        return None

    def is_redeemable(self, now: datetime) -> bool:
        return self.unavailable_reason(now) is None
