"""Workspace routes: creation, join codes and auto-join."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from kiiaren.application.usecase.workspace import (
    AutoJoinRequest,
    AutoJoinResponse,
    AutoJoinUseCase,
    CreateWorkspaceRequest,
    CreateWorkspaceResponse,
    CreateWorkspaceUseCase,
    JoinWorkspaceRequest,
    JoinWorkspaceResponse,
    JoinWorkspaceUseCase,
)
from kiiaren.domain.service import JWTService
from kiiaren.interface.api.auth import authenticate

router = APIRouter(prefix="/workspaces", tags=["workspaces"], route_class=DishkaRoute)


class CreateWorkspaceAPIRequest(BaseModel):
    """API request for creating a workspace."""

    name: str = Field(min_length=1, max_length=80)


class JoinWorkspaceAPIRequest(BaseModel):
    """API request for joining with a join code."""

    join_code: str = Field(min_length=1, max_length=32)


@router.post(
    "", response_model=CreateWorkspaceResponse, status_code=status.HTTP_201_CREATED
)
async def create_workspace(
    request: CreateWorkspaceAPIRequest,
    create_workspace_use_case: FromDishka[CreateWorkspaceUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateWorkspaceResponse:
    """Create a workspace owned (and administered) by the current user."""
    payload = authenticate(jwt_service, auth_token)
    return await create_workspace_use_case.execute(
        CreateWorkspaceRequest(name=request.name, owner_id=payload.user_id)
    )


@router.post("/join", response_model=JoinWorkspaceResponse)
async def join_workspace(
    request: JoinWorkspaceAPIRequest,
    join_workspace_use_case: FromDishka[JoinWorkspaceUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> JoinWorkspaceResponse:
    """Join a workspace with its join code.

    Returns 403 once the workspace has a verified domain (join codes are
    disabled), 409 if already a member.
    """
    payload = authenticate(jwt_service, auth_token)
    return await join_workspace_use_case.execute(
        JoinWorkspaceRequest(join_code=request.join_code, user_id=payload.user_id)
    )


@router.post("/{workspace_id}/auto-join", response_model=AutoJoinResponse)
async def auto_join(
    workspace_id: UUID,
    auto_join_use_case: FromDishka[AutoJoinUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AutoJoinResponse:
    """Join a workspace that verified the email domain of the session.

    Args:
        workspace_id: Target workspace
        auto_join_use_case: Auto-join use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Outcome with ``reason`` domain_not_verified or already_member on
        refusal
    """
    payload = authenticate(jwt_service, auth_token)
    return await auto_join_use_case.execute(
        AutoJoinRequest(
            workspace_id=str(workspace_id),
            user_id=payload.user_id,
            email=payload.email,
        )
    )
