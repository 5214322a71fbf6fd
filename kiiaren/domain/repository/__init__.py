"""Repository interfaces for the workspace trust domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from kiiaren.domain.repository.domain_claim import DomainClaimRepository
from kiiaren.domain.repository.invite_link import InviteLinkRepository
from kiiaren.domain.repository.member import MemberRepository
from kiiaren.domain.repository.workspace import WorkspaceRepository

__all__ = [
    "DomainClaimRepository",
    "InviteLinkRepository",
    "MemberRepository",
    "WorkspaceRepository",
]
