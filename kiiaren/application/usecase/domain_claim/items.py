"""Domain claim response items."""

from datetime import datetime

from pydantic import BaseModel

from kiiaren.domain.model import DomainClaim
from kiiaren.domain.value import DomainStatus


class DomainClaimItem(BaseModel):
    """Domain claim as shown to workspace admins."""

    domain_id: str
    workspace_id: str
    domain: str
    verification_token: str
    status: DomainStatus
    verified_at: datetime | None = None
    created_at: datetime
    created_by: str

    @classmethod
    def from_claim(cls, claim: DomainClaim) -> "DomainClaimItem":
        return cls(
            domain_id=str(claim.id),
            workspace_id=str(claim.workspace_id),
            domain=claim.domain.root,
            verification_token=claim.verification_token.root,
            status=claim.status,
            verified_at=claim.verified_at,
            created_at=claim.created_at,
            created_by=str(claim.created_by),
        )
