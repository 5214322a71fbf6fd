"""Create workspace use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.domain.service import WorkspaceService
from kiiaren.domain.value import UserId


class CreateWorkspaceRequest(BaseModel):
    """Create workspace request."""

    name: str
    owner_id: str  # User ID from auth


class CreateWorkspaceResponse(BaseModel):
    """Create workspace response."""

    workspace_id: str
    name: str
    join_code: str
    domain_verified: bool
    join_code_enabled: bool
    created_at: datetime


class CreateWorkspaceUseCase(BaseUseCase):
    """Use case for creating a workspace; the creator becomes its admin."""

    def __init__(self, workspace_service: WorkspaceService) -> None:
        """Initialize create workspace use case.

        Args:
            workspace_service: Workspace service
        """
        self.workspace_service = workspace_service

    async def execute(self, request: CreateWorkspaceRequest) -> CreateWorkspaceResponse:
        with logfire.span("create_workspace.execute", owner_id=request.owner_id):
            workspace = await self.workspace_service.create_workspace(
                request.name, UserId(UUID(request.owner_id))
            )
            return CreateWorkspaceResponse(
                workspace_id=str(workspace.id),
                name=workspace.name,
                join_code=workspace.join_code,
                domain_verified=workspace.domain_verified,
                join_code_enabled=workspace.join_code_enabled,
                created_at=workspace.created_at,
            )
