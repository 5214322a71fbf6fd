"""Tests for invite link use cases."""

from uuid import uuid4

import pytest

from kiiaren.application.usecase.invite_link import (
    CreateInviteLinkRequest,
    CreateInviteLinkUseCase,
    GetInviteLinkRequest,
    GetInviteLinkUseCase,
    ListInviteLinksRequest,
    ListInviteLinksUseCase,
    RedeemInviteLinkRequest,
    RedeemInviteLinkUseCase,
    RevokeInviteLinkRequest,
    RevokeInviteLinkUseCase,
    ValidateInviteLinkRequest,
    ValidateInviteLinkUseCase,
)
from kiiaren.domain.error import (
    InviteLinkNotFoundError,
    NotWorkspaceAdminError,
    ValidationError,
)
from kiiaren.domain.service import WorkspaceService
from kiiaren.domain.value import InviteLinkFailureReason, InviteLinkScopeType
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def setup_workspace(env):
    workspace_service = await env.get(WorkspaceService)
    owner_id = new_user_id()
    member_id = new_user_id()
    workspace = await workspace_service.create_workspace("Acme", owner_id)
    await workspace_service.join_by_code(workspace.join_code, member_id)
    return workspace, owner_id, member_id


async def create_link(env, workspace, owner_id, **options):
    use_case = await env.get(CreateInviteLinkUseCase)
    response = await use_case.execute(
        CreateInviteLinkRequest(
            workspace_id=str(workspace.id), requester_id=str(owner_id), **options
        )
    )
    return response.invite_link


class TestCreateInviteLinkUseCase:
    @pytest.mark.asyncio
    async def test_admin_creates_link(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)

        link = await create_link(unit_env, workspace, owner_id, max_uses=10)

        assert link.workspace_id == str(workspace.id)
        assert link.invite_url.endswith(f"/join/{link.code}")
        assert link.used_count == 0
        assert link.max_uses == 10
        assert link.valid is True
        assert link.unavailable_reason is None

    @pytest.mark.asyncio
    async def test_channel_link(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)
        channel_id = str(uuid4())

        link = await create_link(
            unit_env,
            workspace,
            owner_id,
            scope_type=InviteLinkScopeType.CHANNEL,
            channel_id=channel_id,
        )

        assert link.scope_type == InviteLinkScopeType.CHANNEL
        assert link.channel_id == channel_id

    @pytest.mark.asyncio
    async def test_channel_scope_without_channel(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)

        with pytest.raises(ValidationError):
            await create_link(
                unit_env, workspace, owner_id, scope_type=InviteLinkScopeType.CHANNEL
            )

    @pytest.mark.asyncio
    async def test_member_cannot_create_link(self, unit_env):
        workspace, _, member_id = await setup_workspace(unit_env)

        with pytest.raises(NotWorkspaceAdminError):
            await create_link(unit_env, workspace, member_id)


class TestRedeemInviteLinkUseCase:
    @pytest.mark.asyncio
    async def test_redeem_then_already_member(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)
        link = await create_link(unit_env, workspace, owner_id)
        redeem = await unit_env.get(RedeemInviteLinkUseCase)
        user_id = str(new_user_id())

        first = await redeem.execute(
            RedeemInviteLinkRequest(code=link.code, user_id=user_id)
        )
        second = await redeem.execute(
            RedeemInviteLinkRequest(code=link.code, user_id=user_id)
        )

        assert first.success is True
        assert first.workspace_id == str(workspace.id)
        assert second.success is False
        assert second.reason == InviteLinkFailureReason.ALREADY_MEMBER
        assert second.error == "You are already a member of this workspace"

    @pytest.mark.asyncio
    async def test_redeem_unknown_code(self, unit_env):
        redeem = await unit_env.get(RedeemInviteLinkUseCase)

        response = await redeem.execute(
            RedeemInviteLinkRequest(code="missing", user_id=str(new_user_id()))
        )

        assert response.success is False
        assert response.workspace_id is None
        assert response.reason == InviteLinkFailureReason.NOT_FOUND


class TestValidateAndGetUseCases:
    @pytest.mark.asyncio
    async def test_validate_valid_link(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)
        link = await create_link(unit_env, workspace, owner_id)
        validate = await unit_env.get(ValidateInviteLinkUseCase)

        response = await validate.execute(ValidateInviteLinkRequest(code=link.code))

        assert response.valid is True
        assert response.reason is None
        assert response.workspace_id == str(workspace.id)
        assert response.scope_type == InviteLinkScopeType.WORKSPACE

    @pytest.mark.asyncio
    async def test_validate_revoked_link(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)
        link = await create_link(unit_env, workspace, owner_id)
        revoke = await unit_env.get(RevokeInviteLinkUseCase)
        validate = await unit_env.get(ValidateInviteLinkUseCase)
        await revoke.execute(
            RevokeInviteLinkRequest(
                invite_link_id=link.invite_link_id, requester_id=str(owner_id)
            )
        )

        response = await validate.execute(ValidateInviteLinkRequest(code=link.code))

        assert response.valid is False
        assert response.reason == InviteLinkFailureReason.REVOKED
        assert response.message == "Invite link has been revoked"

    @pytest.mark.asyncio
    async def test_validate_unknown_link(self, unit_env):
        validate = await unit_env.get(ValidateInviteLinkUseCase)

        response = await validate.execute(ValidateInviteLinkRequest(code="nope"))

        assert response.valid is False
        assert response.reason == InviteLinkFailureReason.NOT_FOUND
        assert response.message == "Invite link not found"

    @pytest.mark.asyncio
    async def test_get_by_code(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)
        link = await create_link(unit_env, workspace, owner_id)
        get = await unit_env.get(GetInviteLinkUseCase)

        found = await get.execute(GetInviteLinkRequest(code=link.code))
        missing = await get.execute(GetInviteLinkRequest(code="nope"))

        assert found.invite_link.invite_link_id == link.invite_link_id
        assert missing.invite_link is None


class TestListAndRevokeUseCases:
    @pytest.mark.asyncio
    async def test_list_links(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)
        await create_link(unit_env, workspace, owner_id)
        await create_link(unit_env, workspace, owner_id)
        list_links = await unit_env.get(ListInviteLinksUseCase)

        response = await list_links.execute(
            ListInviteLinksRequest(
                workspace_id=str(workspace.id), requester_id=str(owner_id)
            )
        )

        assert response.total == 2
        assert len(response.invite_links) == 2

    @pytest.mark.asyncio
    async def test_member_cannot_list_links(self, unit_env):
        workspace, _, member_id = await setup_workspace(unit_env)
        list_links = await unit_env.get(ListInviteLinksUseCase)

        with pytest.raises(NotWorkspaceAdminError):
            await list_links.execute(
                ListInviteLinksRequest(
                    workspace_id=str(workspace.id), requester_id=str(member_id)
                )
            )

    @pytest.mark.asyncio
    async def test_revoke_marks_link_unavailable(self, unit_env):
        workspace, owner_id, _ = await setup_workspace(unit_env)
        link = await create_link(unit_env, workspace, owner_id)
        revoke = await unit_env.get(RevokeInviteLinkUseCase)

        response = await revoke.execute(
            RevokeInviteLinkRequest(
                invite_link_id=link.invite_link_id, requester_id=str(owner_id)
            )
        )

        assert response.invite_link.revoked_at is not None
        assert response.invite_link.valid is False
        assert response.invite_link.unavailable_reason == InviteLinkFailureReason.REVOKED

    @pytest.mark.asyncio
    async def test_member_cannot_revoke(self, unit_env):
        workspace, owner_id, member_id = await setup_workspace(unit_env)
        link = await create_link(unit_env, workspace, owner_id)
        revoke = await unit_env.get(RevokeInviteLinkUseCase)

        with pytest.raises(NotWorkspaceAdminError):
            await revoke.execute(
                RevokeInviteLinkRequest(
                    invite_link_id=link.invite_link_id, requester_id=str(member_id)
                )
            )

    @pytest.mark.asyncio
    async def test_revoke_unknown_link(self, unit_env):
        revoke = await unit_env.get(RevokeInviteLinkUseCase)

        with pytest.raises(InviteLinkNotFoundError):
            await revoke.execute(
                RevokeInviteLinkRequest(
                    invite_link_id=str(uuid4()), requester_id=str(new_user_id())
                )
            )
