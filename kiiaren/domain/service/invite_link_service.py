"""Invite link domain service."""

import secrets
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from kiiaren.domain.error import (
    AlreadyMemberError,
    InviteLinkNotFoundError,
    ValidationError,
)
from kiiaren.domain.model import InviteLink, Member
from kiiaren.domain.repository import InviteLinkRepository, MemberRepository
from kiiaren.domain.value import (
    ChannelId,
    InviteCode,
    InviteLinkFailureReason,
    InviteLinkId,
    InviteLinkScope,
    MemberId,
    MemberRole,
    UserId,
    WorkspaceId,
)

from .base import Service

DEFAULT_EXPIRES_IN_HOURS = 24

FAILURE_MESSAGES: dict[InviteLinkFailureReason, str] = {
    InviteLinkFailureReason.NOT_FOUND: "Invite link not found",
    InviteLinkFailureReason.REVOKED: "Invite link has been revoked",
    InviteLinkFailureReason.EXPIRED: "Invite link has expired",
    InviteLinkFailureReason.MAX_USES: "Invite link has reached maximum uses",
    InviteLinkFailureReason.ALREADY_MEMBER: "You are already a member of this workspace",
}


class InviteLinkValidation(BaseModel):
    """Redeemability preview of an invite link."""

    valid: bool
    reason: InviteLinkFailureReason | None = None
    invite_link: InviteLink | None = None


class InviteRedemptionResult(BaseModel):
    """Outcome of a redemption; failures carry a reason code, never raise."""

    success: bool
    workspace_id: WorkspaceId | None = None
    channel_id: ChannelId | None = None
    reason: InviteLinkFailureReason | None = None
    error: str | None = None

    @classmethod
    def failed(
        cls,
        reason: InviteLinkFailureReason,
        workspace_id: WorkspaceId | None = None,
    ) -> "InviteRedemptionResult":
        return cls(
            success=False,
            workspace_id=workspace_id,
            reason=reason,
            error=FAILURE_MESSAGES[reason],
        )


class InviteLinkService(Service):
    """Domain service for invite link issuance and redemption."""

    def __init__(
        self,
        invite_link_repository: InviteLinkRepository,
        member_repository: MemberRepository,
        default_expires_in_hours: int = DEFAULT_EXPIRES_IN_HOURS,
    ) -> None:
        """Initialize invite link service.

        Args:
            invite_link_repository: Invite link repository
            member_repository: Member repository
            default_expires_in_hours: Expiry used when none is requested
        """
        self.invite_link_repository = invite_link_repository
        self.member_repository = member_repository
        self.default_expires_in_hours = default_expires_in_hours

    async def create_invite_link(
        self,
        workspace_id: WorkspaceId,
        created_by: UserId,
        scope: InviteLinkScope | None = None,
        expires_in_hours: int | None = None,
        max_uses: int | None = None,
    ) -> InviteLink:
        """Issue a new invite link.

        Args:
            workspace_id: Workspace the link admits to
            created_by: Admin issuing the link
            scope: Workspace (default) or channel scope
            expires_in_hours: Lifetime, defaults to 24 hours
            max_uses: Optional cap on redemptions

        Returns:
            The new link

        Raises:
            ValidationError: If expiry or max_uses is not positive
        """
        hours = (
            self.default_expires_in_hours
            if expires_in_hours is None
            else expires_in_hours
        )
        if hours <= 0:
            raise ValidationError("expires_in_hours must be positive")
        if max_uses is not None and max_uses < 1:
            raise ValidationError("max_uses must be at least 1")

        with logfire.span(
            "invite_link_service.create_invite_link",
            workspace_id=str(workspace_id),
            created_by=str(created_by),
        ):
            now = datetime.now(timezone.utc)
            invite_link = InviteLink(
                id=InviteLinkId(uuid4()),
                workspace_id=workspace_id,
                code=InviteCode(secrets.token_urlsafe(16)),
                created_by=created_by,
                created_at=now,
                expires_at=now + timedelta(hours=hours),
                max_uses=max_uses,
                used_count=0,
                scope=scope or InviteLinkScope(),
            )

            saved = await self.invite_link_repository.add(invite_link)
            logfire.info(
                "Invite link created",
                invite_link_id=str(saved.id),
                workspace_id=str(workspace_id),
                expires_at=saved.expires_at.isoformat(),
                max_uses=max_uses,
            )
            return saved

    async def get_by_code(self, code: str) -> InviteLink | None:
        """Raw lookup by code, without any validity filtering.

        A code that is not syntactically valid cannot exist and yields None.
        """
        with logfire.span("invite_link_service.get_by_code", code=code[:8] + "..."):
            try:
                invite_code = InviteCode(code)
            except ValueError:
                return None
            return await self.invite_link_repository.find_by_code(invite_code)

    async def get_by_id(self, invite_link_id: InviteLinkId) -> InviteLink:
        """Get a link by ID.

        Raises:
            InviteLinkNotFoundError: If the link does not exist
        """
        invite_link = await self.invite_link_repository.find_by_id(invite_link_id)
        if invite_link is None:
            raise InviteLinkNotFoundError(str(invite_link_id))
        return invite_link

    async def validate(self, code: str) -> InviteLinkValidation:
        """Whether a link could be redeemed right now, ignoring membership."""
        invite_link = await self.get_by_code(code)
        if invite_link is None:
            return InviteLinkValidation(
                valid=False, reason=InviteLinkFailureReason.NOT_FOUND
            )
        reason = invite_link.unavailable_reason(datetime.now(timezone.utc))
        return InviteLinkValidation(
            valid=reason is None, reason=reason, invite_link=invite_link
        )

    async def redeem(self, code: str, user_id: UserId) -> InviteRedemptionResult:
        """Redeem an invite link for a user.

        Checks run in order (not found, revoked, expired, max uses, already a
        member); the use is then consumed together with creating the
        membership. A redemption that loses a race is re-classified from a
        fresh read of the link.

        Args:
            code: Invite code
            user_id: Redeeming user

        Returns:
            Redemption result
        """
        with logfire.span(
            "invite_link_service.redeem", code=code[:8] + "...", user_id=str(user_id)
        ):
            now = datetime.now(timezone.utc)
            invite_link = await self.get_by_code(code)
            if invite_link is None:
                logfire.warn("Invite link not found", code=code[:8] + "...")
                return InviteRedemptionResult.failed(InviteLinkFailureReason.NOT_FOUND)

            reason = invite_link.unavailable_reason(now)
            if reason is not None:
                logfire.warn(
                    "Invite link not redeemable",
                    invite_link_id=str(invite_link.id),
                    reason=reason.value,
                )
                return InviteRedemptionResult.failed(reason, invite_link.workspace_id)

            existing = await self.member_repository.find(
                invite_link.workspace_id, user_id
            )
            if existing is not None:
                return InviteRedemptionResult.failed(
                    InviteLinkFailureReason.ALREADY_MEMBER, invite_link.workspace_id
                )

            member = Member(
                id=MemberId(uuid4()),
                workspace_id=invite_link.workspace_id,
                user_id=user_id,
                role=MemberRole.MEMBER,
                created_at=now,
            )
            try:
                consumed = await self.invite_link_repository.redeem(
                    invite_link.id, member, now
                )
            except AlreadyMemberError:
                return InviteRedemptionResult.failed(
                    InviteLinkFailureReason.ALREADY_MEMBER, invite_link.workspace_id
                )

            if consumed is None:
                fresh = await self.invite_link_repository.find_by_id(invite_link.id)
                reason = (
                    fresh.unavailable_reason(now)
                    if fresh is not None
                    else InviteLinkFailureReason.NOT_FOUND
                )
                reason = reason or InviteLinkFailureReason.MAX_USES
                logfire.warn(
                    "Invite link redemption lost a race",
                    invite_link_id=str(invite_link.id),
                    reason=reason.value,
                )
                return InviteRedemptionResult.failed(reason, invite_link.workspace_id)

            logfire.info(
                "Invite link redeemed",
                invite_link_id=str(consumed.id),
                workspace_id=str(consumed.workspace_id),
                user_id=str(user_id),
                used_count=consumed.used_count,
            )
            return InviteRedemptionResult(
                success=True,
                workspace_id=consumed.workspace_id,
                channel_id=consumed.scope.channel_id,
            )

    async def list_invite_links(self, workspace_id: WorkspaceId) -> list[InviteLink]:
        """All links of a workspace, newest first, whatever their validity."""
        with logfire.span(
            "invite_link_service.list_invite_links", workspace_id=str(workspace_id)
        ):
            return await self.invite_link_repository.find_by_workspace(workspace_id)

    async def revoke(self, invite_link_id: InviteLinkId) -> InviteLink:
        """Revoke a link. Revoking twice keeps the first timestamp.

        Raises:
            InviteLinkNotFoundError: If the link does not exist
        """
        with logfire.span(
            "invite_link_service.revoke", invite_link_id=str(invite_link_id)
        ):
            revoked = await self.invite_link_repository.revoke(
                invite_link_id, datetime.now(timezone.utc)
            )
            if revoked is None:
                raise InviteLinkNotFoundError(str(invite_link_id))
            logfire.info(
                "Invite link revoked",
                invite_link_id=str(invite_link_id),
                revoked_at=revoked.revoked_at.isoformat()
                if revoked.revoked_at
                else None,
            )
            return revoked
