"""Workspace membership entity."""

from datetime import datetime, timezone

from pydantic import Field

from kiiaren.domain.model.common import DomainModel
from kiiaren.domain.value import MemberId, MemberRole, UserId, WorkspaceId


class Member(DomainModel):
    """A user's membership in a workspace.

    Business rules:
    - At most one membership per (workspace, user)
    - Invite redemption and auto-join always create the member role
    """

    id: MemberId
    workspace_id: WorkspaceId
    user_id: UserId
    role: MemberRole = MemberRole.MEMBER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return self.role == MemberRole.ADMIN
