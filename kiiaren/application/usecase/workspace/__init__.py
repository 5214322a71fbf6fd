"""Workspace use cases."""

from kiiaren.application.usecase.workspace.auto_join import (
    AutoJoinRequest,
    AutoJoinResponse,
    AutoJoinUseCase,
)
from kiiaren.application.usecase.workspace.create_workspace import (
    CreateWorkspaceRequest,
    CreateWorkspaceResponse,
    CreateWorkspaceUseCase,
)
from kiiaren.application.usecase.workspace.join_workspace import (
    JoinWorkspaceRequest,
    JoinWorkspaceResponse,
    JoinWorkspaceUseCase,
)

__all__ = [
    "AutoJoinRequest",
    "AutoJoinResponse",
    "AutoJoinUseCase",
    "CreateWorkspaceRequest",
    "CreateWorkspaceResponse",
    "CreateWorkspaceUseCase",
    "JoinWorkspaceRequest",
    "JoinWorkspaceResponse",
    "JoinWorkspaceUseCase",
]
