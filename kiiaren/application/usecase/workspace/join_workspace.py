"""Join workspace by code use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from kiiaren.application.usecase.base import BaseUseCase
from kiiaren.domain.service import WorkspaceService
from kiiaren.domain.value import MemberRole, UserId


class JoinWorkspaceRequest(BaseModel):
    """Join workspace request."""

    join_code: str
    user_id: str  # User ID from auth


class JoinWorkspaceResponse(BaseModel):
    """Join workspace response."""

    workspace_id: str
    member_id: str
    role: MemberRole


class JoinWorkspaceUseCase(BaseUseCase):
    """Use case for joining a workspace with its join code.

    Join codes stop working once the workspace verifies a domain.
    """

    def __init__(self, workspace_service: WorkspaceService) -> None:
        self.workspace_service = workspace_service

    async def execute(self, request: JoinWorkspaceRequest) -> JoinWorkspaceResponse:
        """Execute join flow.

        Raises:
            WorkspaceNotFoundError: If the code is unknown
            JoinCodeDisabledError: If join codes are disabled
            AlreadyMemberError: If the user is already a member
        """
        with logfire.span("join_workspace.execute", user_id=request.user_id):
            member = await self.workspace_service.join_by_code(
                request.join_code, UserId(UUID(request.user_id))
            )
            return JoinWorkspaceResponse(
                workspace_id=str(member.workspace_id),
                member_id=str(member.id),
                role=member.role,
            )
