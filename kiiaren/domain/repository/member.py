"""Member repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from kiiaren.domain.model.member import Member
from kiiaren.domain.value import UserId, WorkspaceId


class MemberRepository(ABC):
    """Repository for workspace memberships."""

    @abstractmethod
    async def find(
        self, workspace_id: WorkspaceId, user_id: UserId
    ) -> Optional[Member]:
        """Find a user's membership in a workspace.

        Args:
            workspace_id: The workspace
            user_id: The user

        Returns:
            The membership if found, None otherwise
        """
        pass

    @abstractmethod
    async def add_if_absent(self, member: Member) -> bool:
        """Atomically insert a membership unless one exists for the same
        workspace and user.

        Args:
            member: The membership to insert

        Returns:
            True if inserted, False if the user was already a member
        """
        pass
