"""Shared state behind the in-memory repositories."""

from kiiaren.domain.model import DomainClaim, InviteLink, Member, Workspace
from kiiaren.domain.value import (
    DomainClaimId,
    InviteLinkId,
    UserId,
    WorkspaceId,
)


class InMemoryStore:
    """Tables of the in-memory backend.

    One store plays the role of the database: repositories built on the same
    store see each other's writes, like Postgres repositories sharing a
    database across requests.
    """

    def __init__(self) -> None:
        self.workspaces: dict[WorkspaceId, Workspace] = {}
        self.members: dict[tuple[WorkspaceId, UserId], Member] = {}
        self.domain_claims: dict[DomainClaimId, DomainClaim] = {}
        self.invite_links: dict[InviteLinkId, InviteLink] = {}
