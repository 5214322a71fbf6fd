"""Invite link repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from kiiaren.domain.model.invite_link import InviteLink
from kiiaren.domain.model.member import Member
from kiiaren.domain.value import InviteCode, InviteLinkId, WorkspaceId


class InviteLinkRepository(ABC):
    """Repository for InviteLink entity.

    Defines the contract for invite link persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_link_id: InviteLinkId) -> Optional[InviteLink]:
        """Find an invite link by ID.

        Args:
            invite_link_id: The link's unique identifier

        Returns:
            The invite link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: InviteCode) -> Optional[InviteLink]:
        """Find an invite link by its redemption code.

        Used when a user opens an invite link.

        Args:
            code: The redemption code

        Returns:
            The invite link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_workspace(self, workspace_id: WorkspaceId) -> list[InviteLink]:
        """List all invite links of a workspace, newest first.

        Args:
            workspace_id: The workspace

        Returns:
            List of invite links, including expired and revoked ones
        """
        pass

    @abstractmethod
    async def add(self, invite_link: InviteLink) -> InviteLink:
        """Insert a new invite link.

        Args:
            invite_link: The invite link to insert

        Returns:
            The saved invite link
        """
        pass

    @abstractmethod
    async def revoke(
        self, invite_link_id: InviteLinkId, revoked_at: datetime
    ) -> Optional[InviteLink]:
        """Set revoked_at unless it is already set.

        Args:
            invite_link_id: The invite link to revoke
            revoked_at: Revocation timestamp

        Returns:
            The (possibly already) revoked link, None if it does not exist
        """
        pass

    @abstractmethod
    async def redeem(
        self, invite_link_id: InviteLinkId, member: Member, now: datetime
    ) -> Optional[InviteLink]:
        """Consume one use of a link and create the membership, atomically.

        The increment is conditional on the link still being redeemable at
        ``now`` (not revoked, not expired, under max_uses). The membership is
        inserted in the same unit of work; if it already exists nothing is
        consumed.

        Args:
            invite_link_id: The invite link to consume
            member: Membership to create
            now: Redemption time

        Returns:
            The updated link, None if it was no longer redeemable

        Raises:
            AlreadyMemberError: If the user is already a member (no use spent)
        """
        pass
