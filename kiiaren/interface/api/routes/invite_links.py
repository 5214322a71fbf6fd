"""Invite link routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from kiiaren.application.usecase.invite_link import (
    CreateInviteLinkRequest,
    CreateInviteLinkResponse,
    CreateInviteLinkUseCase,
    GetInviteLinkRequest,
    GetInviteLinkResponse,
    GetInviteLinkUseCase,
    ListInviteLinksRequest,
    ListInviteLinksResponse,
    ListInviteLinksUseCase,
    RedeemInviteLinkRequest,
    RedeemInviteLinkResponse,
    RedeemInviteLinkUseCase,
    RevokeInviteLinkRequest,
    RevokeInviteLinkResponse,
    RevokeInviteLinkUseCase,
    ValidateInviteLinkRequest,
    ValidateInviteLinkResponse,
    ValidateInviteLinkUseCase,
)
from kiiaren.domain.service import JWTService
from kiiaren.domain.value import InviteLinkScopeType
from kiiaren.interface.api.auth import authenticate

router = APIRouter(tags=["invite-links"], route_class=DishkaRoute)


class CreateInviteLinkAPIRequest(BaseModel):
    """API request for creating an invite link."""

    scope_type: InviteLinkScopeType = InviteLinkScopeType.WORKSPACE
    channel_id: UUID | None = None
    expires_in_hours: int | None = Field(default=None, gt=0)
    max_uses: int | None = Field(default=None, ge=1)


@router.post(
    "/workspaces/{workspace_id}/invite-links",
    response_model=CreateInviteLinkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invite_link(
    workspace_id: UUID,
    request: CreateInviteLinkAPIRequest,
    create_invite_link_use_case: FromDishka[CreateInviteLinkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateInviteLinkResponse:
    """Issue an invite link (admins only).

    Args:
        workspace_id: Workspace the link admits to
        request: Scope, expiry (default 24h) and usage cap
        create_invite_link_use_case: Create invite link use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        The new link with its shareable URL
    """
    payload = authenticate(jwt_service, auth_token)
    return await create_invite_link_use_case.execute(
        CreateInviteLinkRequest(
            workspace_id=str(workspace_id),
            requester_id=payload.user_id,
            scope_type=request.scope_type,
            channel_id=str(request.channel_id) if request.channel_id else None,
            expires_in_hours=request.expires_in_hours,
            max_uses=request.max_uses,
        )
    )


@router.get(
    "/workspaces/{workspace_id}/invite-links",
    response_model=ListInviteLinksResponse,
)
async def list_invite_links(
    workspace_id: UUID,
    list_invite_links_use_case: FromDishka[ListInviteLinksUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListInviteLinksResponse:
    """List every invite link of the workspace, newest first (admins only)."""
    payload = authenticate(jwt_service, auth_token)
    return await list_invite_links_use_case.execute(
        ListInviteLinksRequest(
            workspace_id=str(workspace_id), requester_id=payload.user_id
        )
    )


@router.get("/invite-links/{code}", response_model=GetInviteLinkResponse)
async def get_invite_link(
    code: str,
    get_invite_link_use_case: FromDishka[GetInviteLinkUseCase],
) -> GetInviteLinkResponse:
    """Look up an invite link by code, whatever its state."""
    return await get_invite_link_use_case.execute(GetInviteLinkRequest(code=code))


@router.get("/invite-links/{code}/validate", response_model=ValidateInviteLinkResponse)
async def validate_invite_link(
    code: str,
    validate_invite_link_use_case: FromDishka[ValidateInviteLinkUseCase],
) -> ValidateInviteLinkResponse:
    """Preview whether an invite link can be redeemed.

    Public endpoint used by the join page before sign-in.
    """
    return await validate_invite_link_use_case.execute(
        ValidateInviteLinkRequest(code=code)
    )


@router.post("/invite-links/{code}/redeem", response_model=RedeemInviteLinkResponse)
async def redeem_invite_link(
    code: str,
    redeem_invite_link_use_case: FromDishka[RedeemInviteLinkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RedeemInviteLinkResponse:
    """Join the link's workspace.

    Business refusals (revoked, expired, max_uses, already_member,
    not_found) come back as 200 with ``success: false`` and a ``reason``.
    """
    payload = authenticate(jwt_service, auth_token)
    return await redeem_invite_link_use_case.execute(
        RedeemInviteLinkRequest(code=code, user_id=payload.user_id)
    )


@router.post(
    "/invite-links/{invite_link_id}/revoke", response_model=RevokeInviteLinkResponse
)
async def revoke_invite_link(
    invite_link_id: UUID,
    revoke_invite_link_use_case: FromDishka[RevokeInviteLinkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RevokeInviteLinkResponse:
    """Revoke an invite link (admins of its workspace only). Idempotent."""
    payload = authenticate(jwt_service, auth_token)
    return await revoke_invite_link_use_case.execute(
        RevokeInviteLinkRequest(
            invite_link_id=str(invite_link_id), requester_id=payload.user_id
        )
    )
