"""In-memory workspace repository for testing."""

from typing import Optional

from kiiaren.domain.model import Workspace
from kiiaren.domain.repository import WorkspaceRepository
from kiiaren.domain.value import WorkspaceId

from .store import InMemoryStore


class InMemoryWorkspaceRepository(WorkspaceRepository):
    """In-memory implementation of WorkspaceRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Find a workspace by ID."""
        return self._store.workspaces.get(workspace_id)

    async def find_by_join_code(self, join_code: str) -> Optional[Workspace]:
        """Find a workspace by its join code."""
        for workspace in self._store.workspaces.values():
            if workspace.join_code == join_code:
                return workspace
        return None

    async def update_trust_flags(
        self,
        workspace_id: WorkspaceId,
        domain_verified: bool,
        join_code_enabled: bool,
    ) -> None:
        """Patch the trust flags of a stored workspace."""
        workspace = self._store.workspaces.get(workspace_id)
        if workspace is None:
            return
        self._store.workspaces[workspace_id] = workspace.model_copy(
            update={
                "domain_verified": domain_verified,
                "join_code_enabled": join_code_enabled,
            }
        )

    async def insert_if_absent(self, workspace: Workspace) -> bool:
        """Insert a workspace unless the join code (or ID) already exists."""
        for existing in self._store.workspaces.values():
            if existing.id == workspace.id or existing.join_code == workspace.join_code:
                return False
        self._store.workspaces[workspace.id] = workspace
        return True

    async def lock_for_update(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Nothing to lock: in-memory operations never interleave mid-write."""
        return self._store.workspaces.get(workspace_id)
