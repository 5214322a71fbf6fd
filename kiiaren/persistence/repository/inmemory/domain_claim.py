"""In-memory domain claim repository for testing."""

from datetime import datetime
from typing import Optional

from kiiaren.domain.model import DomainClaim
from kiiaren.domain.repository import DomainClaimRepository
from kiiaren.domain.value import DomainClaimId, DomainName, DomainStatus, WorkspaceId

from .store import InMemoryStore


class InMemoryDomainClaimRepository(DomainClaimRepository):
    """In-memory implementation of DomainClaimRepository for testing.

    Check-and-insert runs without yielding to the event loop, which makes it
    atomic with respect to other coroutines.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, domain_id: DomainClaimId) -> Optional[DomainClaim]:
        """Find a claim by ID."""
        return self._store.domain_claims.get(domain_id)

    async def find_by_domain(self, domain: DomainName) -> Optional[DomainClaim]:
        """Find the claim on a domain."""
        for claim in self._store.domain_claims.values():
            if claim.domain == domain:
                return claim
        return None

    async def find_by_workspace(
        self, workspace_id: WorkspaceId, status: DomainStatus | None = None
    ) -> list[DomainClaim]:
        """List a workspace's claims, oldest first."""
        matches = [
            claim
            for claim in self._store.domain_claims.values()
            if claim.workspace_id == workspace_id
            and (status is None or claim.status == status)
        ]
        matches.sort(key=lambda c: c.created_at)
        return matches

    async def find_verified_for_workspace(
        self, workspace_id: WorkspaceId, domain: DomainName
    ) -> Optional[DomainClaim]:
        """Find a workspace's verified claim on a domain."""
        for claim in self._store.domain_claims.values():
            if (
                claim.workspace_id == workspace_id
                and claim.domain == domain
                and claim.is_verified
            ):
                return claim
        return None

    async def insert_if_absent(self, claim: DomainClaim) -> bool:
        """Insert a claim unless the domain is already claimed."""
        for existing in self._store.domain_claims.values():
            if existing.domain == claim.domain:
                return False
        self._store.domain_claims[claim.id] = claim
        return True

    async def update_status(
        self,
        domain_id: DomainClaimId,
        status: DomainStatus,
        verified_at: datetime | None,
    ) -> Optional[DomainClaim]:
        """Patch status and verified_at."""
        claim = self._store.domain_claims.get(domain_id)
        if claim is None:
            return None
        updated = claim.model_copy(update={"status": status, "verified_at": verified_at})
        self._store.domain_claims[domain_id] = updated
        return updated

    async def delete(self, domain_id: DomainClaimId) -> bool:
        """Delete a claim by ID."""
        return self._store.domain_claims.pop(domain_id, None) is not None

    async def count_verified(self, workspace_id: WorkspaceId) -> int:
        """Count a workspace's verified claims."""
        return sum(
            1
            for claim in self._store.domain_claims.values()
            if claim.workspace_id == workspace_id and claim.is_verified
        )
