"""Workspace access control domain service."""

import logfire

from kiiaren.domain.error import NotWorkspaceAdminError, NotWorkspaceMemberError
from kiiaren.domain.model import Member
from kiiaren.domain.repository import MemberRepository
from kiiaren.domain.value import UserId, WorkspaceId

from .base import Service


class AccessService(Service):
    """Membership and role checks guarding workspace operations."""

    def __init__(self, member_repository: MemberRepository) -> None:
        """Initialize access service.

        Args:
            member_repository: Member repository
        """
        self.member_repository = member_repository

    async def require_member(self, workspace_id: WorkspaceId, user_id: UserId) -> Member:
        """Return the user's membership or fail.

        Args:
            workspace_id: Target workspace
            user_id: Authenticated user

        Returns:
            The membership record

        Raises:
            NotWorkspaceMemberError: If the user is not a member
        """
        member = await self.member_repository.find(workspace_id, user_id)
        if member is None:
            logfire.warn(
                "Access denied: not a member",
                workspace_id=str(workspace_id),
                user_id=str(user_id),
            )
            raise NotWorkspaceMemberError(str(workspace_id), str(user_id))
        return member

    async def require_admin(self, workspace_id: WorkspaceId, user_id: UserId) -> Member:
        """Return the user's membership if it has the admin role, or fail.

        Args:
            workspace_id: Target workspace
            user_id: Authenticated user

        Returns:
            The admin membership record

        Raises:
            NotWorkspaceMemberError: If the user is not a member
            NotWorkspaceAdminError: If the user is a member but not an admin
        """
        member = await self.require_member(workspace_id, user_id)
        if not member.is_admin:
            logfire.warn(
                "Access denied: admin role required",
                workspace_id=str(workspace_id),
                user_id=str(user_id),
            )
            raise NotWorkspaceAdminError(str(workspace_id), str(user_id))
        return member
