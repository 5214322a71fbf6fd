"""Unit tests for the pure helpers of the trust services."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from kiiaren.domain.error import InvalidDomainError
from kiiaren.domain.model import DomainClaim, Member
from kiiaren.domain.service import (
    decide_auto_join,
    email_domain,
    normalize_txt_record,
    parse_domain,
)
from kiiaren.domain.service.workspace_service import generate_join_code
from kiiaren.domain.value import (
    AutoJoinFailureReason,
    DomainClaimId,
    DomainName,
    DomainStatus,
    MemberId,
    UserId,
    VerificationToken,
    WorkspaceId,
)


def make_claim(status: DomainStatus) -> DomainClaim:
    return DomainClaim(
        id=DomainClaimId(uuid4()),
        workspace_id=WorkspaceId(uuid4()),
        domain=DomainName("acme.com"),
        verification_token=VerificationToken("tok"),
        status=status,
        verified_at=datetime.now(timezone.utc)
        if status == DomainStatus.VERIFIED
        else None,
        created_by=UserId(uuid4()),
    )


class TestNormalizeTxtRecord:
    def test_strips_surrounding_quotes(self):
        assert normalize_txt_record('"kiiaren-verification=abc"') == (
            "kiiaren-verification=abc"
        )

    def test_unescapes_inner_quotes(self):
        assert normalize_txt_record('"say \\"hi\\""') == 'say "hi"'

    def test_unquoted_value_unchanged(self):
        assert normalize_txt_record("v=spf1 -all") == "v=spf1 -all"


class TestEmailDomain:
    def test_extracts_and_normalizes(self):
        assert email_domain("Bob@Acme.COM") == DomainName("acme.com")

    def test_uses_last_at_sign(self):
        assert email_domain('"odd@local"@acme.com') == DomainName("acme.com")

    @pytest.mark.parametrize("email", ["", "no-at-sign", "bob@", "bob@localhost"])
    def test_unusable_addresses(self, email):
        assert email_domain(email) is None


class TestParseDomain:
    def test_valid(self):
        assert parse_domain("Acme.com.") == DomainName("acme.com")

    def test_invalid_raises_domain_error(self):
        with pytest.raises(InvalidDomainError, match="Invalid domain"):
            parse_domain("not a domain")


class TestDecideAutoJoin:
    def test_no_claim(self):
        assert decide_auto_join(None, None) == AutoJoinFailureReason.DOMAIN_NOT_VERIFIED

    def test_pending_claim_does_not_count(self):
        claim = make_claim(DomainStatus.PENDING)
        assert (
            decide_auto_join(claim, None) == AutoJoinFailureReason.DOMAIN_NOT_VERIFIED
        )

    def test_existing_member(self):
        claim = make_claim(DomainStatus.VERIFIED)
        member = Member(
            id=MemberId(uuid4()),
            workspace_id=claim.workspace_id,
            user_id=UserId(uuid4()),
        )
        assert decide_auto_join(claim, member) == AutoJoinFailureReason.ALREADY_MEMBER

    def test_allowed(self):
        assert decide_auto_join(make_claim(DomainStatus.VERIFIED), None) is None


def test_join_code_format():
    code = generate_join_code()
    assert len(code) == 6
    assert code.isalnum()
    assert code == code.upper()
