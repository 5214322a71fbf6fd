"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from kiiaren.config import Settings
from kiiaren.domain.repository import (
    DomainClaimRepository,
    InviteLinkRepository,
    MemberRepository,
    WorkspaceRepository,
)
from kiiaren.persistence.database import create_engine, create_session_factory
from kiiaren.persistence.repository import (
    PostgresDomainClaimRepository,
    PostgresInviteLinkRepository,
    PostgresMemberRepository,
    PostgresWorkspaceRepository,
)
from kiiaren.util.di.base import ProviderBase
from kiiaren.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_workspace_repository(self, session: AsyncSession) -> WorkspaceRepository:
        """Provide Workspace repository."""
        return PostgresWorkspaceRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, session: AsyncSession) -> MemberRepository:
        """Provide Member repository."""
        return PostgresMemberRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_domain_claim_repository(
        self, session: AsyncSession
    ) -> DomainClaimRepository:
        """Provide DomainClaim repository."""
        return PostgresDomainClaimRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_link_repository(self, session: AsyncSession) -> InviteLinkRepository:
        """Provide InviteLink repository."""
        return PostgresInviteLinkRepository(session)
