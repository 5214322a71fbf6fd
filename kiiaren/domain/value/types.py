"""Domain value objects for workspace trust.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Literal

from pydantic import field_validator, model_validator

from kiiaren.domain.value.common import RootValueObject, ValueObject
from kiiaren.domain.value.identifiers import ChannelId

# DNS challenge wire format:
#   _kiiaren-verification.acme.com. 300 IN TXT "kiiaren-verification=<token>"
DNS_TXT_SUBDOMAIN = "_kiiaren-verification"
DNS_TXT_PREFIX = "kiiaren-verification="

_DNS_LABEL = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")


class DomainStatus(str, Enum):
    """Verification status of a domain claim.

    - pending: claim added, awaiting DNS verification
    - verified: DNS TXT record confirmed, domain is trusted
    - failed: last verification attempt did not find the record (can retry)
    """

    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"


class MemberRole(str, Enum):
    """Role of a user inside a workspace."""

    ADMIN = "admin"
    MEMBER = "member"


class InviteLinkScopeType(str, Enum):
    """What an invite link grants access to."""

    WORKSPACE = "workspace"
    CHANNEL = "channel"


class InviteLinkFailureReason(str, Enum):
    """User-displayable reasons an invite link cannot be redeemed."""

    NOT_FOUND = "not_found"
    REVOKED = "revoked"
    EXPIRED = "expired"
    MAX_USES = "max_uses"
    ALREADY_MEMBER = "already_member"


class AutoJoinFailureReason(str, Enum):
    """Reasons a user cannot auto-join a workspace by email domain."""

    DOMAIN_NOT_VERIFIED = "domain_not_verified"
    ALREADY_MEMBER = "already_member"


class DomainName(RootValueObject[str]):
    """Normalized DNS host name of an email domain.

    Input is trimmed, lower-cased and stripped of one trailing dot.
    Must have at least two labels, each 1-63 characters of ``[a-z0-9-]``
    not starting or ending with a hyphen, 253 characters at most.
    Examples: 'acme.com', 'eng.example.co.uk'
    """

    @field_validator("root")
    @classmethod
    def normalize_and_validate(cls, v: str) -> str:
        """Normalize then validate host name syntax."""
        v = v.strip().lower()
        if v.endswith("."):
            v = v[:-1]
        if not v or len(v) > 253:
            raise ValueError("Domain must be 1-253 characters")
        labels = v.split(".")
        if len(labels) < 2:
            raise ValueError("Domain must contain at least one dot")
        for label in labels:
            if not _DNS_LABEL.match(label):
                raise ValueError(f"Invalid domain label: '{label}'")
        return v

    @property
    def challenge_name(self) -> str:
        """DNS name the TXT challenge record must be published at."""
        return f"{DNS_TXT_SUBDOMAIN}.{self.root}"


class VerificationToken(RootValueObject[str]):
    """Random secret an admin publishes in DNS to prove domain control."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    @property
    def expected_record(self) -> str:
        """Exact TXT value that proves ownership."""
        return f"{DNS_TXT_PREFIX}{self.root}"


class InviteCode(RootValueObject[str]):
    """URL-safe invite link redemption code."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is URL-safe and within length limits."""
        if not re.match(r"^[A-Za-z0-9_-]{1,255}$", v):
            raise ValueError("Invite code must be 1-255 URL-safe characters")
        return v


class InviteLinkScope(ValueObject):
    """Scope granted by an invite link.

    - workspace: full workspace access (member role)
    - channel: workspace membership plus a pointer to a specific channel
    """

    type: InviteLinkScopeType = InviteLinkScopeType.WORKSPACE
    channel_id: ChannelId | None = None

    @model_validator(mode="after")
    def check_channel(self) -> "InviteLinkScope":
        """Channel scopes need a channel, workspace scopes must not have one."""
        if self.type == InviteLinkScopeType.CHANNEL and self.channel_id is None:
            raise ValueError("Channel scope requires a channel_id")
        if self.type == InviteLinkScopeType.WORKSPACE and self.channel_id is not None:
            raise ValueError("Workspace scope cannot reference a channel")
        return self


class VerificationInstructions(ValueObject):
    """DNS record an admin must publish to verify a domain."""

    record_type: Literal["TXT"] = "TXT"
    record_name: str
    record_value: str
    domain: DomainName
    status: DomainStatus
