"""Unit tests for trust value objects and entity rules."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from kiiaren.domain.model import InviteLink
from kiiaren.domain.value import (
    ChannelId,
    DomainName,
    InviteCode,
    InviteLinkFailureReason,
    InviteLinkId,
    InviteLinkScope,
    InviteLinkScopeType,
    UserId,
    VerificationToken,
    WorkspaceId,
)


class TestDomainName:
    """Tests for domain normalization and validation."""

    def test_normalizes_case_whitespace_and_trailing_dot(self):
        assert DomainName("  Acme.COM. ").root == "acme.com"

    def test_accepts_multi_label_domains(self):
        assert DomainName("eng.example.co.uk").root == "eng.example.co.uk"

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "localhost", "acme..com", "-acme.com", "acme-.com", "ac me.com"],
    )
    def test_rejects_invalid_domains(self, raw):
        with pytest.raises(ValueError):
            DomainName(raw)

    def test_rejects_overlong_domain(self):
        with pytest.raises(ValueError):
            DomainName(("a" * 60 + ".") * 5 + "com")

    def test_challenge_name(self):
        assert (
            DomainName("acme.com").challenge_name == "_kiiaren-verification.acme.com"
        )

    def test_equal_after_normalization(self):
        assert DomainName("ACME.com") == DomainName("acme.com.")


class TestVerificationToken:
    def test_expected_record(self):
        token = VerificationToken("abc123")
        assert token.expected_record == "kiiaren-verification=abc123"

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            VerificationToken("")


class TestInviteCode:
    def test_url_safe_code_accepted(self):
        assert InviteCode("aB3_-x").root == "aB3_-x"

    @pytest.mark.parametrize("raw", ["", "has space", "slash/code", "a" * 256])
    def test_invalid_code_rejected(self, raw):
        with pytest.raises(ValueError):
            InviteCode(raw)


class TestInviteLinkScope:
    def test_defaults_to_workspace_scope(self):
        scope = InviteLinkScope()
        assert scope.type == InviteLinkScopeType.WORKSPACE
        assert scope.channel_id is None

    def test_channel_scope_requires_channel(self):
        with pytest.raises(ValueError):
            InviteLinkScope(type=InviteLinkScopeType.CHANNEL)

    def test_workspace_scope_rejects_channel(self):
        with pytest.raises(ValueError):
            InviteLinkScope(
                type=InviteLinkScopeType.WORKSPACE, channel_id=ChannelId(uuid4())
            )

    def test_channel_scope(self):
        channel_id = ChannelId(uuid4())
        scope = InviteLinkScope(type=InviteLinkScopeType.CHANNEL, channel_id=channel_id)
        assert scope.channel_id == channel_id


def make_link(**overrides) -> InviteLink:
    now = datetime.now(timezone.utc)
    fields = dict(
        id=InviteLinkId(uuid4()),
        workspace_id=WorkspaceId(uuid4()),
        code=InviteCode("code123"),
        created_by=UserId(uuid4()),
        created_at=now,
        expires_at=now + timedelta(hours=1),
    )
    fields.update(overrides)
    return InviteLink(**fields)


class TestInviteLinkAvailability:
    """Tests for the redeemability check order."""

    def test_fresh_link_is_redeemable(self):
        link = make_link()
        assert link.unavailable_reason(datetime.now(timezone.utc)) is None
        assert link.is_redeemable(datetime.now(timezone.utc))

    def test_expired_at_exact_expiry(self):
        link = make_link()
        assert link.unavailable_reason(link.expires_at) == InviteLinkFailureReason.EXPIRED

    def test_exhausted(self):
        link = make_link(max_uses=2, used_count=2)
        assert (
            link.unavailable_reason(datetime.now(timezone.utc))
            == InviteLinkFailureReason.MAX_USES
        )

    def test_revoked_wins_over_expired_and_exhausted(self):
        now = datetime.now(timezone.utc)
        link = make_link(
            expires_at=now - timedelta(hours=1),
            max_uses=1,
            used_count=1,
            revoked_at=now - timedelta(minutes=5),
        )
        assert link.unavailable_reason(now) == InviteLinkFailureReason.REVOKED

    def test_expired_wins_over_exhausted(self):
        now = datetime.now(timezone.utc)
        link = make_link(expires_at=now - timedelta(seconds=1), max_uses=1, used_count=1)
        assert link.unavailable_reason(now) == InviteLinkFailureReason.EXPIRED

    def test_max_uses_must_be_positive(self):
        with pytest.raises(ValueError):
            make_link(max_uses=0)
