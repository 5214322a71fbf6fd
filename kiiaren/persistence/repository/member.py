"""PostgreSQL implementation of Member repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from kiiaren.domain.model import Member
from kiiaren.domain.repository import MemberRepository
from kiiaren.domain.value import UserId, WorkspaceId
from kiiaren.persistence.mappers import member_to_dict, row_to_member
from kiiaren.persistence.tables import members_table


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, workspace_id: WorkspaceId, user_id: UserId
    ) -> Optional[Member]:
        """Find a user's membership in a workspace."""
        stmt = select(members_table).where(
            and_(
                members_table.c.workspace_id == workspace_id,
                members_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_member(dict(row)) if row else None

    async def add_if_absent(self, member: Member) -> bool:
        """Insert a membership, relying on the (workspace_id, user_id) unique
        constraint to reject duplicates.

        Args:
            member: Membership to insert

        Returns:
            True if inserted, False if the user was already a member
        """
        stmt = (
            pg_insert(members_table)
            .values(**member_to_dict(member))
            .on_conflict_do_nothing(
                index_elements=[members_table.c.workspace_id, members_table.c.user_id]
            )
            .returning(members_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted
