"""In-memory member repository for testing."""

from typing import Optional

from kiiaren.domain.model import Member
from kiiaren.domain.repository import MemberRepository
from kiiaren.domain.value import UserId, WorkspaceId

from .store import InMemoryStore


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find(
        self, workspace_id: WorkspaceId, user_id: UserId
    ) -> Optional[Member]:
        """Find a user's membership in a workspace."""
        return self._store.members.get((workspace_id, user_id))

    async def add_if_absent(self, member: Member) -> bool:
        """Insert a membership unless the user is already a member."""
        key = (member.workspace_id, member.user_id)
        if key in self._store.members:
            return False
        self._store.members[key] = member
        return True
