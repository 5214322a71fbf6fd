"""Workspace aggregate root.

Only the fields the trust subsystem reads or writes are modelled here.
"""

from datetime import datetime, timezone

from pydantic import Field

from kiiaren.domain.model.common import DomainModel
from kiiaren.domain.value import UserId, WorkspaceId


class Workspace(DomainModel):
    """Workspace aggregate root.

    Trust flags:
    - domain_verified: True iff at least one domain claim is verified
    - join_code_enabled: False while a domain is verified (join codes disabled),
      restored when the last verified domain is removed
    """

    id: WorkspaceId
    name: str = Field(min_length=1, max_length=80)
    owner_id: UserId
    join_code: str
    domain_verified: bool = False
    join_code_enabled: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
