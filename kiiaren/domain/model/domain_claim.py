"""Domain claim entity.

A workspace's assertion of ownership over an email domain, proven by
publishing a DNS TXT challenge record.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from kiiaren.domain.model.common import DomainModel
from kiiaren.domain.value import (
    DomainClaimId,
    DomainName,
    DomainStatus,
    UserId,
    VerificationToken,
    WorkspaceId,
)


class DomainClaim(DomainModel):
    """Domain claim entity.

    State machine:
        pending  --(DNS match)-------> verified
        pending  --(no match)--------> failed
        failed   --(re-verification)-> verified | failed
    verified is terminal; only removing the claim leaves it.

    Business rules:
    - A normalized domain is claimed by at most one workspace, whatever the
      status; removing the claim frees it
    - verification_token is generated at creation and never changes
    - verified_at is set on the first successful verification only
    """

    id: DomainClaimId
    workspace_id: WorkspaceId
    domain: DomainName
    verification_token: VerificationToken
    status: DomainStatus = DomainStatus.PENDING
    verified_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    created_by: UserId

    @property
    def is_verified(self) -> bool:
        return self.status == DomainStatus.VERIFIED
