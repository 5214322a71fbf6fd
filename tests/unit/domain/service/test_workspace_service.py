"""Unit tests for WorkspaceService."""

from unittest.mock import patch
from uuid import uuid4

import pytest

from kiiaren.adapter.dns import MockTxtResolver
from kiiaren.domain.error import (
    AlreadyMemberError,
    BusinessRuleViolationError,
    JoinCodeDisabledError,
    WorkspaceNotFoundError,
)
from kiiaren.domain.repository import MemberRepository
from kiiaren.domain.service import DomainClaimService, WorkspaceService
from kiiaren.domain.value import (
    AutoJoinFailureReason,
    DomainName,
    MemberRole,
    WorkspaceId,
)
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def verify_domain(env, workspace_id, owner_id, domain: str = "acme.com"):
    """Claim and verify a domain for a workspace."""
    domain_service = await env.get(DomainClaimService)
    resolver = await env.get(MockTxtResolver)
    claim = await domain_service.add_domain(workspace_id, DomainName(domain), owner_id)
    resolver.set_records(
        claim.domain.challenge_name, [claim.verification_token.expected_record]
    )
    result = await domain_service.verify_domain(claim.id)
    assert result.success
    return result.domain


class TestCreateWorkspace:
    @pytest.mark.asyncio
    async def test_owner_becomes_admin(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        member_repo = await unit_env.get(MemberRepository)
        owner_id = new_user_id()

        workspace = await service.create_workspace("Acme", owner_id)

        assert workspace.domain_verified is False
        assert workspace.join_code_enabled is True
        assert len(workspace.join_code) == 6
        owner = await member_repo.find(workspace.id, owner_id)
        assert owner is not None
        assert owner.role == MemberRole.ADMIN

    @pytest.mark.asyncio
    async def test_join_code_collision_is_retried(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        first = await service.create_workspace("First", new_user_id())

        with patch(
            "kiiaren.domain.service.workspace_service.generate_join_code",
            side_effect=[first.join_code, "ZZ9999"],
        ):
            second = await service.create_workspace("Second", new_user_id())

        assert second.join_code == "ZZ9999"
        assert (await service.get_workspace(second.id)).name == "Second"

    @pytest.mark.asyncio
    async def test_join_code_collisions_exhaust_attempts(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        first = await service.create_workspace("First", new_user_id())
        owner_id = new_user_id()

        with patch(
            "kiiaren.domain.service.workspace_service.generate_join_code",
            return_value=first.join_code,
        ):
            with pytest.raises(BusinessRuleViolationError):
                await service.create_workspace("Second", owner_id)

    @pytest.mark.asyncio
    async def test_get_unknown_workspace(self, unit_env):
        service = await unit_env.get(WorkspaceService)

        with pytest.raises(WorkspaceNotFoundError):
            await service.get_workspace(WorkspaceId(uuid4()))


class TestJoinByCode:
    @pytest.mark.asyncio
    async def test_join_is_case_insensitive(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        workspace = await service.create_workspace("Acme", new_user_id())
        user_id = new_user_id()

        member = await service.join_by_code(f" {workspace.join_code.lower()} ", user_id)

        assert member.workspace_id == workspace.id
        assert member.user_id == user_id
        assert member.role == MemberRole.MEMBER

    @pytest.mark.asyncio
    async def test_unknown_code(self, unit_env):
        service = await unit_env.get(WorkspaceService)

        with pytest.raises(WorkspaceNotFoundError):
            await service.join_by_code("NOPE00", new_user_id())

    @pytest.mark.asyncio
    async def test_already_member(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        owner_id = new_user_id()
        workspace = await service.create_workspace("Acme", owner_id)

        with pytest.raises(AlreadyMemberError):
            await service.join_by_code(workspace.join_code, owner_id)

    @pytest.mark.asyncio
    async def test_disabled_after_domain_verification(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        owner_id = new_user_id()
        workspace = await service.create_workspace("Acme", owner_id)
        await verify_domain(unit_env, workspace.id, owner_id)

        with pytest.raises(JoinCodeDisabledError):
            await service.join_by_code(workspace.join_code, new_user_id())

    @pytest.mark.asyncio
    async def test_reenabled_after_domain_removal(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        domain_service = await unit_env.get(DomainClaimService)
        owner_id = new_user_id()
        workspace = await service.create_workspace("Acme", owner_id)
        claim = await verify_domain(unit_env, workspace.id, owner_id)
        await domain_service.remove_domain(claim.id)

        member = await service.join_by_code(workspace.join_code, new_user_id())

        assert member.workspace_id == workspace.id


class TestAutoJoin:
    @pytest.mark.asyncio
    async def test_auto_join_with_verified_claim(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        owner_id = new_user_id()
        workspace = await service.create_workspace("Acme", owner_id)
        claim = await verify_domain(unit_env, workspace.id, owner_id)
        user_id = new_user_id()

        result = await service.auto_join(workspace.id, user_id, claim)

        assert result.success is True
        assert result.member.user_id == user_id
        assert result.member.role == MemberRole.MEMBER

    @pytest.mark.asyncio
    async def test_auto_join_without_claim(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        workspace = await service.create_workspace("Acme", new_user_id())

        result = await service.auto_join(workspace.id, new_user_id(), None)

        assert result.success is False
        assert result.reason == AutoJoinFailureReason.DOMAIN_NOT_VERIFIED
        assert result.member is None

    @pytest.mark.asyncio
    async def test_auto_join_twice(self, unit_env):
        service = await unit_env.get(WorkspaceService)
        owner_id = new_user_id()
        workspace = await service.create_workspace("Acme", owner_id)
        claim = await verify_domain(unit_env, workspace.id, owner_id)
        user_id = new_user_id()

        await service.auto_join(workspace.id, user_id, claim)
        again = await service.auto_join(workspace.id, user_id, claim)

        assert again.success is False
        assert again.reason == AutoJoinFailureReason.ALREADY_MEMBER
