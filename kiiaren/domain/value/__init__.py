"""Domain value objects for workspace trust."""

from kiiaren.domain.value.identifiers import (
    ChannelId,
    DomainClaimId,
    InviteLinkId,
    MemberId,
    UserId,
    WorkspaceId,
)
from kiiaren.domain.value.types import (
    DNS_TXT_PREFIX,
    DNS_TXT_SUBDOMAIN,
    AutoJoinFailureReason,
    DomainName,
    DomainStatus,
    InviteCode,
    InviteLinkFailureReason,
    InviteLinkScope,
    InviteLinkScopeType,
    MemberRole,
    VerificationInstructions,
    VerificationToken,
)

__all__ = [
    # Identifiers
    "UserId",
    "WorkspaceId",
    "MemberId",
    "ChannelId",
    "DomainClaimId",
    "InviteLinkId",
    # Types
    "DNS_TXT_PREFIX",
    "DNS_TXT_SUBDOMAIN",
    "AutoJoinFailureReason",
    "DomainName",
    "DomainStatus",
    "InviteCode",
    "InviteLinkFailureReason",
    "InviteLinkScope",
    "InviteLinkScopeType",
    "MemberRole",
    "VerificationInstructions",
    "VerificationToken",
]
