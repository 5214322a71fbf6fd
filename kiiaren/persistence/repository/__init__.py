"""PostgreSQL repository implementations."""

from kiiaren.persistence.repository.domain_claim import PostgresDomainClaimRepository
from kiiaren.persistence.repository.invite_link import PostgresInviteLinkRepository
from kiiaren.persistence.repository.member import PostgresMemberRepository
from kiiaren.persistence.repository.workspace import PostgresWorkspaceRepository

__all__ = [
    "PostgresDomainClaimRepository",
    "PostgresInviteLinkRepository",
    "PostgresMemberRepository",
    "PostgresWorkspaceRepository",
]
