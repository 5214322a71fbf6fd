"""PostgreSQL implementation of DomainClaim repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from kiiaren.domain.model import DomainClaim
from kiiaren.domain.repository import DomainClaimRepository
from kiiaren.domain.value import DomainClaimId, DomainName, DomainStatus, WorkspaceId
from kiiaren.persistence.mappers import domain_claim_to_dict, row_to_domain_claim
from kiiaren.persistence.tables import domain_claims_table


class PostgresDomainClaimRepository(DomainClaimRepository):
    """PostgreSQL implementation of DomainClaimRepository.

    Domain uniqueness is enforced by the unique index on
    ``domain_claims.domain``; inserts use ON CONFLICT DO NOTHING so a lost
    race surfaces as a return value instead of an IntegrityError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, domain_id: DomainClaimId) -> Optional[DomainClaim]:
        """Find a claim by ID."""
        stmt = select(domain_claims_table).where(domain_claims_table.c.id == domain_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_domain_claim(dict(row)) if row else None

    async def find_by_domain(self, domain: DomainName) -> Optional[DomainClaim]:
        """Find the claim on a domain."""
        stmt = select(domain_claims_table).where(
            domain_claims_table.c.domain == domain.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_domain_claim(dict(row)) if row else None

    async def find_by_workspace(
        self, workspace_id: WorkspaceId, status: DomainStatus | None = None
    ) -> list[DomainClaim]:
        """List a workspace's claims, oldest first."""
        stmt = (
            select(domain_claims_table)
            .where(domain_claims_table.c.workspace_id == workspace_id)
            .order_by(domain_claims_table.c.created_at.asc())
        )

        if status:
            stmt = stmt.where(domain_claims_table.c.status == status.value)

        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_domain_claim(dict(row)) for row in rows]

    async def find_verified_for_workspace(
        self, workspace_id: WorkspaceId, domain: DomainName
    ) -> Optional[DomainClaim]:
        """Find a workspace's verified claim on a domain.

        Uses idx_domain_claims_workspace_status.
        """
        stmt = select(domain_claims_table).where(
            and_(
                domain_claims_table.c.workspace_id == workspace_id,
                domain_claims_table.c.status == DomainStatus.VERIFIED.value,
                domain_claims_table.c.domain == domain.root,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_domain_claim(dict(row)) if row else None

    async def insert_if_absent(self, claim: DomainClaim) -> bool:
        """Insert a claim unless the domain is already claimed.

        Args:
            claim: Claim to insert

        Returns:
            True if inserted, False on conflict with an existing claim
        """
        stmt = (
            pg_insert(domain_claims_table)
            .values(**domain_claim_to_dict(claim))
            .on_conflict_do_nothing(index_elements=[domain_claims_table.c.domain])
            .returning(domain_claims_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted

    async def update_status(
        self,
        domain_id: DomainClaimId,
        status: DomainStatus,
        verified_at: datetime | None,
    ) -> Optional[DomainClaim]:
        """Patch status and verified_at, returning the updated row."""
        stmt = (
            update(domain_claims_table)
            .where(domain_claims_table.c.id == domain_id)
            .values(status=status.value, verified_at=verified_at)
            .returning(domain_claims_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_domain_claim(dict(row)) if row else None

    async def delete(self, domain_id: DomainClaimId) -> bool:
        """Delete a claim by ID."""
        stmt = (
            delete(domain_claims_table)
            .where(domain_claims_table.c.id == domain_id)
            .returning(domain_claims_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def count_verified(self, workspace_id: WorkspaceId) -> int:
        """Count a workspace's verified claims."""
        stmt = (
            select(func.count())
            .select_from(domain_claims_table)
            .where(
                and_(
                    domain_claims_table.c.workspace_id == workspace_id,
                    domain_claims_table.c.status == DomainStatus.VERIFIED.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
