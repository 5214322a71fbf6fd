"""In-memory repository implementations for testing."""

from .domain_claim import InMemoryDomainClaimRepository
from .invite_link import InMemoryInviteLinkRepository
from .member import InMemoryMemberRepository
from .store import InMemoryStore
from .workspace import InMemoryWorkspaceRepository

__all__ = [
    "InMemoryDomainClaimRepository",
    "InMemoryInviteLinkRepository",
    "InMemoryMemberRepository",
    "InMemoryStore",
    "InMemoryWorkspaceRepository",
]
