"""In-memory invite link repository for testing."""

from datetime import datetime
from typing import Optional

from kiiaren.domain.error import AlreadyMemberError
from kiiaren.domain.model import InviteLink, Member
from kiiaren.domain.repository import InviteLinkRepository
from kiiaren.domain.value import InviteCode, InviteLinkId, WorkspaceId

from .store import InMemoryStore


class InMemoryInviteLinkRepository(InviteLinkRepository):
    """In-memory implementation of InviteLinkRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, invite_link_id: InviteLinkId) -> Optional[InviteLink]:
        """Find an invite link by ID."""
        return self._store.invite_links.get(invite_link_id)

    async def find_by_code(self, code: InviteCode) -> Optional[InviteLink]:
        """Find an invite link by its code."""
        for invite_link in self._store.invite_links.values():
            if invite_link.code == code:
                return invite_link
        return None

    async def find_by_workspace(self, workspace_id: WorkspaceId) -> list[InviteLink]:
        """List a workspace's invite links, newest first."""
        matches = [
            link
            for link in self._store.invite_links.values()
            if link.workspace_id == workspace_id
        ]
        matches.sort(key=lambda link: link.created_at, reverse=True)
        return matches

    async def add(self, invite_link: InviteLink) -> InviteLink:
        """Insert a new invite link."""
        self._store.invite_links[invite_link.id] = invite_link
        return invite_link

    async def revoke(
        self, invite_link_id: InviteLinkId, revoked_at: datetime
    ) -> Optional[InviteLink]:
        """Set revoked_at once."""
        invite_link = self._store.invite_links.get(invite_link_id)
        if invite_link is None or invite_link.revoked_at is not None:
            return invite_link
        revoked = invite_link.model_copy(update={"revoked_at": revoked_at})
        self._store.invite_links[invite_link_id] = revoked
        return revoked

    async def redeem(
        self, invite_link_id: InviteLinkId, member: Member, now: datetime
    ) -> Optional[InviteLink]:
        """Consume one use and add the membership in a single step."""
        invite_link = self._store.invite_links.get(invite_link_id)
        if invite_link is None or not invite_link.is_redeemable(now):
            return None

        key = (member.workspace_id, member.user_id)
        if key in self._store.members:
            raise AlreadyMemberError(str(member.workspace_id), str(member.user_id))

        consumed = invite_link.model_copy(
            update={"used_count": invite_link.used_count + 1}
        )
        self._store.invite_links[invite_link_id] = consumed
        self._store.members[key] = member
        return consumed
