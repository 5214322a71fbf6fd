"""Workspace repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from kiiaren.domain.model.workspace import Workspace
from kiiaren.domain.value import WorkspaceId


class WorkspaceRepository(ABC):
    """Repository for Workspace aggregate.

    Defines the contract for workspace persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Find a workspace by ID.

        Args:
            workspace_id: The workspace's unique identifier

        Returns:
            The workspace if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_join_code(self, join_code: str) -> Optional[Workspace]:
        """Find a workspace by its public join code.

        Args:
            join_code: The join code

        Returns:
            The workspace if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_trust_flags(
        self,
        workspace_id: WorkspaceId,
        domain_verified: bool,
        join_code_enabled: bool,
    ) -> None:
        """Patch only the domain trust flags of a workspace.

        Args:
            workspace_id: The workspace to update
            domain_verified: New value of domain_verified
            join_code_enabled: New value of join_code_enabled
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, workspace: Workspace) -> bool:
        """Insert a new workspace unless its join code is already taken.

        Args:
            workspace: The new workspace

        Returns:
            True if inserted, False on a join code (or ID) conflict
        """
        pass

    @abstractmethod
    async def lock_for_update(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Lock a workspace row until the current transaction ends.

        Writers of the trust flags take this lock before reading the verified
        claims the flags derive from, so concurrent verifications and
        removals of one workspace's claims are applied one at a time.

        Args:
            workspace_id: The workspace to lock

        Returns:
            The locked workspace, or None if it does not exist
        """
        pass
