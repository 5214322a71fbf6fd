"""Domain claim repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from kiiaren.domain.model.domain_claim import DomainClaim
from kiiaren.domain.value import DomainClaimId, DomainName, DomainStatus, WorkspaceId


class DomainClaimRepository(ABC):
    """Repository for DomainClaim entity.

    The domain column is unique across all workspaces. Implementations must
    make ``insert_if_absent`` atomic per normalized domain: two concurrent
    inserts for the same domain never both succeed.
    """

    @abstractmethod
    async def find_by_id(self, domain_id: DomainClaimId) -> Optional[DomainClaim]:
        """Find a claim by ID.

        Args:
            domain_id: The claim's unique identifier

        Returns:
            The claim if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_domain(self, domain: DomainName) -> Optional[DomainClaim]:
        """Find the claim on a domain, whichever workspace holds it.

        Args:
            domain: Normalized domain name

        Returns:
            The claim if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_workspace(
        self, workspace_id: WorkspaceId, status: DomainStatus | None = None
    ) -> list[DomainClaim]:
        """List a workspace's claims, oldest first.

        Args:
            workspace_id: The workspace
            status: Optional status filter

        Returns:
            List of claims
        """
        pass

    @abstractmethod
    async def find_verified_for_workspace(
        self, workspace_id: WorkspaceId, domain: DomainName
    ) -> Optional[DomainClaim]:
        """Find a workspace's verified claim on a domain.

        Critical path for auto-join.

        Args:
            workspace_id: The workspace
            domain: Normalized domain name

        Returns:
            The verified claim if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, claim: DomainClaim) -> bool:
        """Atomically insert a claim unless its domain is already claimed.

        Args:
            claim: The new claim

        Returns:
            True if inserted, False if the domain is already claimed
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        domain_id: DomainClaimId,
        status: DomainStatus,
        verified_at: datetime | None,
    ) -> Optional[DomainClaim]:
        """Patch the status (and verification time) of a claim.

        Args:
            domain_id: The claim to update
            status: New status
            verified_at: Verification timestamp to store

        Returns:
            The updated claim, None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, domain_id: DomainClaimId) -> bool:
        """Delete a claim.

        Args:
            domain_id: The claim to delete

        Returns:
            True if a claim was deleted
        """
        pass

    @abstractmethod
    async def count_verified(self, workspace_id: WorkspaceId) -> int:
        """Count a workspace's verified claims.

        Args:
            workspace_id: The workspace

        Returns:
            Number of verified claims
        """
        pass
