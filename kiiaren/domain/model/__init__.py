"""Domain model entities for workspace trust."""

from kiiaren.domain.model.domain_claim import DomainClaim
from kiiaren.domain.model.invite_link import InviteLink
from kiiaren.domain.model.member import Member
from kiiaren.domain.model.workspace import Workspace

__all__ = [
    "DomainClaim",
    "InviteLink",
    "Member",
    "Workspace",
]
