"""Unit tests for row <-> model mappers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from kiiaren.domain.model import DomainClaim, InviteLink
from kiiaren.domain.value import (
    ChannelId,
    DomainClaimId,
    DomainName,
    DomainStatus,
    InviteCode,
    InviteLinkId,
    InviteLinkScope,
    InviteLinkScopeType,
    UserId,
    VerificationToken,
    WorkspaceId,
)
from kiiaren.persistence.mappers import (
    domain_claim_to_dict,
    invite_link_to_dict,
    row_to_domain_claim,
    row_to_invite_link,
)


def test_domain_claim_columns_hold_primitives():
    claim = DomainClaim(
        id=DomainClaimId(uuid4()),
        workspace_id=WorkspaceId(uuid4()),
        domain=DomainName("acme.com"),
        verification_token=VerificationToken("tok"),
        status=DomainStatus.VERIFIED,
        verified_at=datetime.now(timezone.utc),
        created_by=UserId(uuid4()),
    )

    row = domain_claim_to_dict(claim)

    assert row["domain"] == "acme.com"
    assert row["verification_token"] == "tok"
    assert row["status"] == "verified"
    assert row_to_domain_claim(row) == claim


def test_invite_link_scope_is_flattened():
    now = datetime.now(timezone.utc)
    channel_id = ChannelId(uuid4())
    link = InviteLink(
        id=InviteLinkId(uuid4()),
        workspace_id=WorkspaceId(uuid4()),
        code=InviteCode("abc"),
        created_by=UserId(uuid4()),
        created_at=now,
        expires_at=now + timedelta(hours=24),
        max_uses=3,
        scope=InviteLinkScope(type=InviteLinkScopeType.CHANNEL, channel_id=channel_id),
    )

    row = invite_link_to_dict(link)

    assert row["scope_type"] == "channel"
    assert row["channel_id"] == channel_id
    assert "scope" not in row
    assert row_to_invite_link(row) == link


def test_string_uuids_from_driver_are_accepted():
    now = datetime.now(timezone.utc)
    row = {
        "id": str(uuid4()),
        "workspace_id": str(uuid4()),
        "code": "abc",
        "created_by": str(uuid4()),
        "created_at": now,
        "expires_at": now,
        "max_uses": None,
        "used_count": 0,
        "scope_type": "workspace",
        "channel_id": None,
        "revoked_at": None,
    }

    link = row_to_invite_link(row)

    assert str(link.id) == row["id"]
    assert link.scope.type == InviteLinkScopeType.WORKSPACE
