"""Invite link use cases."""

from kiiaren.application.usecase.invite_link.create_invite_link import (
    CreateInviteLinkRequest,
    CreateInviteLinkResponse,
    CreateInviteLinkUseCase,
)
from kiiaren.application.usecase.invite_link.get_invite_link import (
    GetInviteLinkRequest,
    GetInviteLinkResponse,
    GetInviteLinkUseCase,
)
from kiiaren.application.usecase.invite_link.items import InviteLinkItem
from kiiaren.application.usecase.invite_link.list_invite_links import (
    ListInviteLinksRequest,
    ListInviteLinksResponse,
    ListInviteLinksUseCase,
)
from kiiaren.application.usecase.invite_link.redeem_invite_link import (
    RedeemInviteLinkRequest,
    RedeemInviteLinkResponse,
    RedeemInviteLinkUseCase,
)
from kiiaren.application.usecase.invite_link.revoke_invite_link import (
    RevokeInviteLinkRequest,
    RevokeInviteLinkResponse,
    RevokeInviteLinkUseCase,
)
from kiiaren.application.usecase.invite_link.validate_invite_link import (
    ValidateInviteLinkRequest,
    ValidateInviteLinkResponse,
    ValidateInviteLinkUseCase,
)

__all__ = [
    "CreateInviteLinkRequest",
    "CreateInviteLinkResponse",
    "CreateInviteLinkUseCase",
    "GetInviteLinkRequest",
    "GetInviteLinkResponse",
    "GetInviteLinkUseCase",
    "InviteLinkItem",
    "ListInviteLinksRequest",
    "ListInviteLinksResponse",
    "ListInviteLinksUseCase",
    "RedeemInviteLinkRequest",
    "RedeemInviteLinkResponse",
    "RedeemInviteLinkUseCase",
    "RevokeInviteLinkRequest",
    "RevokeInviteLinkResponse",
    "RevokeInviteLinkUseCase",
    "ValidateInviteLinkRequest",
    "ValidateInviteLinkResponse",
    "ValidateInviteLinkUseCase",
]
