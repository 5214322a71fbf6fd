"""Workspace domain service: creation, join codes and auto-join."""

import secrets
import string
from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from kiiaren.domain.error import (
    AlreadyMemberError,
    BusinessRuleViolationError,
    JoinCodeDisabledError,
    WorkspaceNotFoundError,
)
from kiiaren.domain.model import DomainClaim, Member, Workspace
from kiiaren.domain.repository import MemberRepository, WorkspaceRepository
from kiiaren.domain.value import (
    AutoJoinFailureReason,
    MemberId,
    MemberRole,
    UserId,
    WorkspaceId,
)

from .base import Service

JOIN_CODE_ALPHABET = string.ascii_uppercase + string.digits
JOIN_CODE_LENGTH = 6
JOIN_CODE_ATTEMPTS = 5


def generate_join_code() -> str:
    """Short, human-typeable workspace join code."""
    return "".join(secrets.choice(JOIN_CODE_ALPHABET) for _ in range(JOIN_CODE_LENGTH))


def decide_auto_join(
    verified_claim: DomainClaim | None, existing_member: Member | None
) -> AutoJoinFailureReason | None:
    """Auto-join policy.

    A user may auto-join only when the workspace has a verified claim on
    their email domain and they are not a member yet.

    Returns:
        Why the user cannot auto-join, or None if they can
    """
    if verified_claim is None or not verified_claim.is_verified:
        return AutoJoinFailureReason.DOMAIN_NOT_VERIFIED
    if existing_member is not None:
        return AutoJoinFailureReason.ALREADY_MEMBER
    return None


class AutoJoinResult(BaseModel):
    """Outcome of an auto-join attempt."""

    success: bool
    workspace_id: WorkspaceId
    member: Member | None = None
    reason: AutoJoinFailureReason | None = None


class WorkspaceService(Service):
    """Domain service for workspaces and memberships."""

    def __init__(
        self,
        workspace_repository: WorkspaceRepository,
        member_repository: MemberRepository,
    ) -> None:
        """Initialize workspace service.

        Args:
            workspace_repository: Workspace repository
            member_repository: Member repository
        """
        self.workspace_repository = workspace_repository
        self.member_repository = member_repository

    async def create_workspace(self, name: str, owner_id: UserId) -> Workspace:
        """Create a workspace and make its owner an admin.

        Args:
            name: Workspace name
            owner_id: Creating user

        Returns:
            The new workspace
        """
        with logfire.span(
            "workspace_service.create_workspace", owner_id=str(owner_id)
        ):
            now = datetime.now(timezone.utc)
            saved = None
            for attempt in range(1, JOIN_CODE_ATTEMPTS + 1):
                workspace = Workspace(
                    id=WorkspaceId(uuid4()),
                    name=name,
                    owner_id=owner_id,
                    join_code=generate_join_code(),
                    created_at=now,
                )
                if await self.workspace_repository.insert_if_absent(workspace):
                    saved = workspace
                    break
                logfire.warn("Join code collision", attempt=attempt)
            if saved is None:
                raise BusinessRuleViolationError(
                    "Could not allocate a unique join code, please retry"
                )

            await self.member_repository.add_if_absent(
                Member(
                    id=MemberId(uuid4()),
                    workspace_id=saved.id,
                    user_id=owner_id,
                    role=MemberRole.ADMIN,
                    created_at=now,
                )
            )
            logfire.info(
                "Workspace created", workspace_id=str(saved.id), owner_id=str(owner_id)
            )
            return saved

    async def get_workspace(self, workspace_id: WorkspaceId) -> Workspace:
        """Get a workspace by ID.

        Raises:
            WorkspaceNotFoundError: If the workspace does not exist
        """
        workspace = await self.workspace_repository.find_by_id(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(str(workspace_id))
        return workspace

    async def join_by_code(self, join_code: str, user_id: UserId) -> Member:
        """Join a workspace with its public join code.

        Args:
            join_code: Join code (case-insensitive)
            user_id: Joining user

        Returns:
            The new membership

        Raises:
            WorkspaceNotFoundError: If no workspace has this code
            JoinCodeDisabledError: If the workspace has a verified domain
            AlreadyMemberError: If the user is already a member
        """
        with logfire.span("workspace_service.join_by_code", user_id=str(user_id)):
            workspace = await self.workspace_repository.find_by_join_code(
                join_code.strip().upper()
            )
            if workspace is None:
                logfire.warn("Unknown join code", user_id=str(user_id))
                raise WorkspaceNotFoundError(join_code)

            if not workspace.join_code_enabled:
                logfire.warn(
                    "Join code used while disabled",
                    workspace_id=str(workspace.id),
                    user_id=str(user_id),
                )
                raise JoinCodeDisabledError(str(workspace.id))

            member = Member(
                id=MemberId(uuid4()),
                workspace_id=workspace.id,
                user_id=user_id,
                role=MemberRole.MEMBER,
                created_at=datetime.now(timezone.utc),
            )
            if not await self.member_repository.add_if_absent(member):
                raise AlreadyMemberError(str(workspace.id), str(user_id))

            logfire.info(
                "User joined by code",
                workspace_id=str(workspace.id),
                user_id=str(user_id),
            )
            return member

    async def auto_join(
        self,
        workspace_id: WorkspaceId,
        user_id: UserId,
        verified_claim: DomainClaim | None,
    ) -> AutoJoinResult:
        """Add a user whose email domain the workspace has verified.

        Args:
            workspace_id: Target workspace
            user_id: Joining user
            verified_claim: The workspace's verified claim on the user's
                email domain, if any

        Returns:
            Auto-join result
        """
        with logfire.span(
            "workspace_service.auto_join",
            workspace_id=str(workspace_id),
            user_id=str(user_id),
        ):
            existing = await self.member_repository.find(workspace_id, user_id)
            reason = decide_auto_join(verified_claim, existing)
            if reason is not None:
                logfire.info(
                    "Auto-join refused",
                    workspace_id=str(workspace_id),
                    user_id=str(user_id),
                    reason=reason.value,
                )
                return AutoJoinResult(
                    success=False, workspace_id=workspace_id, reason=reason
                )

            member = Member(
                id=MemberId(uuid4()),
                workspace_id=workspace_id,
                user_id=user_id,
                role=MemberRole.MEMBER,
                created_at=datetime.now(timezone.utc),
            )
            if not await self.member_repository.add_if_absent(member):
                return AutoJoinResult(
                    success=False,
                    workspace_id=workspace_id,
                    reason=AutoJoinFailureReason.ALREADY_MEMBER,
                )

            logfire.info(
                "User auto-joined by email domain",
                workspace_id=str(workspace_id),
                user_id=str(user_id),
            )
            return AutoJoinResult(success=True, workspace_id=workspace_id, member=member)
