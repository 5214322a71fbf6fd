"""PostgreSQL implementation of Workspace repository."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from kiiaren.domain.model import Workspace
from kiiaren.domain.repository import WorkspaceRepository
from kiiaren.domain.value import WorkspaceId
from kiiaren.persistence.mappers import row_to_workspace, workspace_to_dict
from kiiaren.persistence.tables import workspaces_table


class PostgresWorkspaceRepository(WorkspaceRepository):
    """PostgreSQL implementation of WorkspaceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Find a workspace by ID."""
        stmt = select(workspaces_table).where(workspaces_table.c.id == workspace_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace(dict(row)) if row else None

    async def find_by_join_code(self, join_code: str) -> Optional[Workspace]:
        """Find a workspace by its join code."""
        stmt = select(workspaces_table).where(
            workspaces_table.c.join_code == join_code
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace(dict(row)) if row else None

    async def update_trust_flags(
        self,
        workspace_id: WorkspaceId,
        domain_verified: bool,
        join_code_enabled: bool,
    ) -> None:
        """Patch the trust flags without touching the rest of the row."""
        stmt = (
            update(workspaces_table)
            .where(workspaces_table.c.id == workspace_id)
            .values(
                domain_verified=domain_verified,
                join_code_enabled=join_code_enabled,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def insert_if_absent(self, workspace: Workspace) -> bool:
        """Insert a workspace unless the join code (or ID) already exists."""
        stmt = (
            pg_insert(workspaces_table)
            .values(**workspace_to_dict(workspace))
            .on_conflict_do_nothing()
            .returning(workspaces_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted

    async def lock_for_update(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """SELECT ... FOR UPDATE on the workspace row."""
        stmt = (
            select(workspaces_table)
            .where(workspaces_table.c.id == workspace_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace(dict(row)) if row else None
