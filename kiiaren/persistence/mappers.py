"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from kiiaren.domain.model import DomainClaim, InviteLink, Member, Workspace
from kiiaren.domain.value import (
    ChannelId,
    DomainClaimId,
    DomainName,
    DomainStatus,
    InviteCode,
    InviteLinkId,
    InviteLinkScope,
    InviteLinkScopeType,
    MemberId,
    MemberRole,
    UserId,
    VerificationToken,
    WorkspaceId,
)


def _uuid(value: Any) -> UUID:
    """Accept both driver UUIDs and their string form."""
    return UUID(value) if isinstance(value, str) else value


def row_to_workspace(row: Dict[str, Any]) -> Workspace:
    """Convert database row to Workspace domain model.

    Args:
        row: Database row as dict

    Returns:
        Workspace domain model
    """
    return Workspace(
        id=WorkspaceId(_uuid(row["id"])),
        name=row["name"],
        owner_id=UserId(_uuid(row["owner_id"])),
        join_code=row["join_code"],
        domain_verified=row["domain_verified"],
        join_code_enabled=row["join_code_enabled"],
        created_at=row["created_at"],
    )


def workspace_to_dict(workspace: Workspace) -> Dict[str, Any]:
    """Convert Workspace domain model to database dict."""
    return workspace.model_dump()


def row_to_member(row: Dict[str, Any]) -> Member:
    """Convert database row to Member domain model.

    Args:
        row: Database row as dict

    Returns:
        Member domain model
    """
    return Member(
        id=MemberId(_uuid(row["id"])),
        workspace_id=WorkspaceId(_uuid(row["workspace_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=MemberRole(row["role"]),
        created_at=row["created_at"],
    )


def member_to_dict(member: Member) -> Dict[str, Any]:
    """Convert Member domain model to database dict."""
    data = member.model_dump()
    data["role"] = member.role.value
    return data


def row_to_domain_claim(row: Dict[str, Any]) -> DomainClaim:
    """Convert database row to DomainClaim domain model.

    Args:
        row: Database row as dict

    Returns:
        DomainClaim domain model
    """
    return DomainClaim(
        id=DomainClaimId(_uuid(row["id"])),
        workspace_id=WorkspaceId(_uuid(row["workspace_id"])),
        domain=DomainName(row["domain"]),
        verification_token=VerificationToken(row["verification_token"]),
        status=DomainStatus(row["status"]),
        verified_at=row.get("verified_at"),
        created_at=row["created_at"],
        created_by=UserId(_uuid(row["created_by"])),
    )


def domain_claim_to_dict(claim: DomainClaim) -> Dict[str, Any]:
    """Convert DomainClaim domain model to database dict.

    Args:
        claim: DomainClaim domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": claim.id,
        "workspace_id": claim.workspace_id,
        "domain": claim.domain.root,
        "verification_token": claim.verification_token.root,
        "status": claim.status.value,
        "verified_at": claim.verified_at,
        "created_at": claim.created_at,
        "created_by": claim.created_by,
    }


def row_to_invite_link(row: Dict[str, Any]) -> InviteLink:
    """Convert database row to InviteLink domain model.

    The scope is stored flattened as ``scope_type`` and ``channel_id``.

    Args:
        row: Database row as dict

    Returns:
        InviteLink domain model
    """
    channel_id = row.get("channel_id")
    return InviteLink(
        id=InviteLinkId(_uuid(row["id"])),
        workspace_id=WorkspaceId(_uuid(row["workspace_id"])),
        code=InviteCode(row["code"]),
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        max_uses=row.get("max_uses"),
        used_count=row["used_count"],
        scope=InviteLinkScope(
            type=InviteLinkScopeType(row["scope_type"]),
            channel_id=ChannelId(_uuid(channel_id)) if channel_id else None,
        ),
        revoked_at=row.get("revoked_at"),
    )


def invite_link_to_dict(invite_link: InviteLink) -> Dict[str, Any]:
    """Convert InviteLink domain model to database dict.

    Args:
        invite_link: InviteLink domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": invite_link.id,
        "workspace_id": invite_link.workspace_id,
        "code": invite_link.code.root,
        "created_by": invite_link.created_by,
        "created_at": invite_link.created_at,
        "expires_at": invite_link.expires_at,
        "max_uses": invite_link.max_uses,
        "used_count": invite_link.used_count,
        "scope_type": invite_link.scope.type.value,
        "channel_id": invite_link.scope.channel_id,
        "revoked_at": invite_link.revoked_at,
    }
