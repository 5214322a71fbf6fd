"""PostgreSQL implementation of InviteLink repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from kiiaren.domain.error import AlreadyMemberError
from kiiaren.domain.model import InviteLink, Member
from kiiaren.domain.repository import InviteLinkRepository
from kiiaren.domain.value import InviteCode, InviteLinkId, WorkspaceId
from kiiaren.persistence.mappers import (
    invite_link_to_dict,
    member_to_dict,
    row_to_invite_link,
)
from kiiaren.persistence.tables import invite_links_table, members_table


class PostgresInviteLinkRepository(InviteLinkRepository):
    """PostgreSQL implementation of InviteLinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_link_id: InviteLinkId) -> Optional[InviteLink]:
        """Find an invite link by ID."""
        stmt = select(invite_links_table).where(
            invite_links_table.c.id == invite_link_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite_link(dict(row)) if row else None

    async def find_by_code(self, code: InviteCode) -> Optional[InviteLink]:
        """Find an invite link by its code."""
        stmt = select(invite_links_table).where(invite_links_table.c.code == code.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite_link(dict(row)) if row else None

    async def find_by_workspace(self, workspace_id: WorkspaceId) -> list[InviteLink]:
        """List a workspace's invite links, newest first."""
        stmt = (
            select(invite_links_table)
            .where(invite_links_table.c.workspace_id == workspace_id)
            .order_by(invite_links_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invite_link(dict(row)) for row in rows]

    async def add(self, invite_link: InviteLink) -> InviteLink:
        """Insert a new invite link."""
        stmt = insert(invite_links_table).values(**invite_link_to_dict(invite_link))
        await self.session.execute(stmt)
        await self.session.flush()
        return invite_link

    async def revoke(
        self, invite_link_id: InviteLinkId, revoked_at: datetime
    ) -> Optional[InviteLink]:
        """Set revoked_at once; an already revoked link keeps its timestamp."""
        stmt = (
            update(invite_links_table)
            .where(
                and_(
                    invite_links_table.c.id == invite_link_id,
                    invite_links_table.c.revoked_at.is_(None),
                )
            )
            .values(revoked_at=revoked_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(invite_link_id)

    async def redeem(
        self, invite_link_id: InviteLinkId, member: Member, now: datetime
    ) -> Optional[InviteLink]:
        """Consume one use and insert the membership inside a savepoint.

        The conditional UPDATE takes the row lock, so concurrent redemptions
        of the same link serialize on it and re-check the predicate against
        the committed used_count. A membership conflict raises out of the
        savepoint, rolling back the increment.

        Args:
            invite_link_id: Link to consume
            member: Membership to create
            now: Redemption time

        Returns:
            The updated link, None if it was no longer redeemable

        Raises:
            AlreadyMemberError: If the membership already exists
        """
        async with self.session.begin_nested():
            consume = (
                update(invite_links_table)
                .where(
                    and_(
                        invite_links_table.c.id == invite_link_id,
                        invite_links_table.c.revoked_at.is_(None),
                        invite_links_table.c.expires_at > now,
                        or_(
                            invite_links_table.c.max_uses.is_(None),
                            invite_links_table.c.used_count
                            < invite_links_table.c.max_uses,
                        ),
                    )
                )
                .values(used_count=invite_links_table.c.used_count + 1)
                .returning(invite_links_table)
            )
            result = await self.session.execute(consume)
            row = result.mappings().first()
            if row is None:
                return None

            join = (
                pg_insert(members_table)
                .values(**member_to_dict(member))
                .on_conflict_do_nothing(
                    index_elements=[
                        members_table.c.workspace_id,
                        members_table.c.user_id,
                    ]
                )
                .returning(members_table.c.id)
            )
            joined = await self.session.execute(join)
            if joined.first() is None:
                raise AlreadyMemberError(str(member.workspace_id), str(member.user_id))

        await self.session.flush()
        return row_to_invite_link(dict(row))
