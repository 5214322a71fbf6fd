"""Integration tests for the PostgreSQL repositories.

These tests verify value object handling and the atomic operations against
a real database.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from kiiaren.domain.error import AlreadyMemberError
from kiiaren.domain.model import DomainClaim, InviteLink, Member, Workspace
from kiiaren.domain.repository import (
    DomainClaimRepository,
    InviteLinkRepository,
    MemberRepository,
    WorkspaceRepository,
)
from kiiaren.domain.service import DomainClaimService, WorkspaceService
from kiiaren.domain.value import (
    DomainClaimId,
    DomainName,
    DomainStatus,
    InviteCode,
    InviteLinkId,
    MemberId,
    UserId,
    VerificationToken,
    WorkspaceId,
)
from tests.di import build_test_container
from tests.harness import create_env_fixture

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


async def create_workspace(env):
    workspace_service = await env.get(WorkspaceService)
    owner_id = UserId(uuid4())
    workspace = await workspace_service.create_workspace("Acme", owner_id)
    return workspace, owner_id


def make_claim(workspace_id, owner_id, domain: str) -> DomainClaim:
    return DomainClaim(
        id=DomainClaimId(uuid4()),
        workspace_id=workspace_id,
        domain=DomainName(domain),
        verification_token=VerificationToken(uuid4().hex),
        created_by=owner_id,
    )


class TestDomainClaimRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_insert_if_absent_enforces_one_claim_per_domain(
        self, integration_env
    ):
        repo = await integration_env.get(DomainClaimRepository)
        first_ws, first_owner = await create_workspace(integration_env)
        second_ws, second_owner = await create_workspace(integration_env)
        domain = f"{uuid4().hex[:12]}.example.com"

        assert await repo.insert_if_absent(make_claim(first_ws.id, first_owner, domain))
        assert not await repo.insert_if_absent(
            make_claim(second_ws.id, second_owner, domain)
        )

        stored = await repo.find_by_domain(DomainName(domain))
        assert stored.workspace_id == first_ws.id
        assert stored.domain == DomainName(domain)

    @pytest.mark.asyncio
    async def test_update_status_and_count(self, integration_env):
        repo = await integration_env.get(DomainClaimRepository)
        workspace, owner_id = await create_workspace(integration_env)
        claim = make_claim(workspace.id, owner_id, f"{uuid4().hex[:12]}.example.com")
        await repo.insert_if_absent(claim)

        verified_at = datetime.now(timezone.utc)
        updated = await repo.update_status(claim.id, DomainStatus.VERIFIED, verified_at)

        assert updated.status == DomainStatus.VERIFIED
        assert await repo.count_verified(workspace.id) == 1
        assert (
            await repo.find_verified_for_workspace(workspace.id, claim.domain)
        ).id == claim.id


class TestInviteLinkRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_redeem_consumes_use_and_adds_member(self, integration_env):
        repo = await integration_env.get(InviteLinkRepository)
        member_repo = await integration_env.get(MemberRepository)
        workspace, owner_id = await create_workspace(integration_env)
        now = datetime.now(timezone.utc)
        link = await repo.add(
            InviteLink(
                id=InviteLinkId(uuid4()),
                workspace_id=workspace.id,
                code=InviteCode(uuid4().hex),
                created_by=owner_id,
                created_at=now,
                expires_at=now + timedelta(hours=1),
                max_uses=1,
            )
        )
        user_id = UserId(uuid4())
        member = Member(
            id=MemberId(uuid4()), workspace_id=workspace.id, user_id=user_id
        )

        consumed = await repo.redeem(link.id, member, now)
        exhausted = await repo.redeem(
            link.id,
            Member(
                id=MemberId(uuid4()), workspace_id=workspace.id, user_id=UserId(uuid4())
            ),
            now,
        )

        assert consumed.used_count == 1
        assert exhausted is None
        assert await member_repo.find(workspace.id, user_id) is not None

    @pytest.mark.asyncio
    async def test_redeem_existing_member_rolls_back_use(self, integration_env):
        repo = await integration_env.get(InviteLinkRepository)
        workspace, owner_id = await create_workspace(integration_env)
        now = datetime.now(timezone.utc)
        link = await repo.add(
            InviteLink(
                id=InviteLinkId(uuid4()),
                workspace_id=workspace.id,
                code=InviteCode(uuid4().hex),
                created_by=owner_id,
                created_at=now,
                expires_at=now + timedelta(hours=1),
            )
        )
        owner_membership = Member(
            id=MemberId(uuid4()), workspace_id=workspace.id, user_id=owner_id
        )

        with pytest.raises(AlreadyMemberError):
            await repo.redeem(link.id, owner_membership, now)

        assert (await repo.find_by_id(link.id)).used_count == 0


class TestWorkspaceRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_insert_if_absent_rejects_taken_join_code(self, integration_env):
        repo = await integration_env.get(WorkspaceRepository)
        existing, owner_id = await create_workspace(integration_env)

        clash = Workspace(
            id=WorkspaceId(uuid4()),
            name="Clash",
            owner_id=owner_id,
            join_code=existing.join_code,
            created_at=datetime.now(timezone.utc),
        )

        assert not await repo.insert_if_absent(clash)
        assert await repo.find_by_id(clash.id) is None

    @pytest.mark.asyncio
    async def test_lock_for_update_returns_workspace(self, integration_env):
        repo = await integration_env.get(WorkspaceRepository)
        workspace, _ = await create_workspace(integration_env)

        locked = await repo.lock_for_update(workspace.id)

        assert locked.id == workspace.id
        assert await repo.lock_for_update(WorkspaceId(uuid4())) is None


class TestTrustFlagConcurrency:
    """Runs each operation in its own request transaction."""

    @pytest.mark.asyncio
    async def test_concurrent_removals_of_last_verified_claims(self):
        container = build_test_container(unmock={"persistence"})
        try:
            async with container() as request:
                workspace, owner_id = await create_workspace(request)
                claim_repo = await request.get(DomainClaimRepository)
                workspace_repo = await request.get(WorkspaceRepository)
                claims = []
                for _ in range(2):
                    claim = make_claim(
                        workspace.id, owner_id, f"{uuid4().hex[:12]}.example.com"
                    )
                    await claim_repo.insert_if_absent(claim)
                    await claim_repo.update_status(
                        claim.id, DomainStatus.VERIFIED, datetime.now(timezone.utc)
                    )
                    claims.append(claim)
                await workspace_repo.update_trust_flags(
                    workspace.id, domain_verified=True, join_code_enabled=False
                )

            async def remove(claim_id):
                async with container() as request:
                    service = await request.get(DomainClaimService)
                    await service.remove_domain(claim_id)

            await asyncio.gather(*(remove(claim.id) for claim in claims))

            async with container() as request:
                service = await request.get(WorkspaceService)
                restored = await service.get_workspace(workspace.id)
            assert restored.domain_verified is False
            assert restored.join_code_enabled is True
        finally:
            await container.close()
