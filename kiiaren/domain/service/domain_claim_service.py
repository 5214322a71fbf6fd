"""Domain verification domain service.

Implements the DNS TXT challenge: an admin claims an email domain, publishes
``kiiaren-verification=<token>`` at ``_kiiaren-verification.<domain>``, and
asks for verification. A verified domain makes the workspace trusted: users
with a matching email may auto-join and join codes are disabled.
"""

import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from kiiaren.domain.error import (
    DomainAlreadyClaimedError,
    DomainNotFoundError,
    InvalidDomainError,
)
from kiiaren.domain.model import DomainClaim
from kiiaren.domain.repository import DomainClaimRepository, WorkspaceRepository
from kiiaren.domain.value import (
    DomainClaimId,
    DomainName,
    DomainStatus,
    UserId,
    VerificationInstructions,
    VerificationToken,
    WorkspaceId,
)

from .base import Service


class TxtRecordResolver(ABC):
    """DNS TXT lookup interface used by domain verification."""

    @abstractmethod
    async def lookup_txt(self, name: str) -> list[str]:
        """Look up the TXT records at a DNS name.

        Implementations never raise for lookup failures; they return an
        empty list instead.

        Args:
            name: Fully qualified DNS name

        Returns:
            Raw TXT record data
        """
        pass


class DomainVerificationResult(BaseModel):
    """Outcome of a verification attempt.

    A negative outcome is not an error: ``success`` is False and ``error``
    explains what was (or was not) found.
    """

    success: bool
    domain: DomainClaim
    error: str | None = None
    records_found: list[str] = []


def parse_domain(raw: str) -> DomainName:
    """Normalize and validate a user-supplied domain.

    Raises:
        InvalidDomainError: If the value is not a valid host name
    """
    try:
        return DomainName(raw)
    except PydanticValidationError as e:
        raise InvalidDomainError(raw, e.errors()[0]["msg"]) from e


def normalize_txt_record(data: str) -> str:
    """Undo DNS presentation quoting of a TXT record.

    Strips one leading and one trailing double quote and unescapes ``\\"``.
    """
    if data.startswith('"'):
        data = data[1:]
    if data.endswith('"'):
        data = data[:-1]
    return data.replace('\\"', '"')


def email_domain(email: str) -> DomainName | None:
    """Domain part of an email address (after the last ``@``), normalized.

    Returns None when the address has no usable domain.
    """
    _, at, host = email.strip().rpartition("@")
    if not at or not host:
        return None
    try:
        return DomainName(host)
    except ValueError:
        return None


class DomainClaimService(Service):
    """Domain service for domain claims and their DNS verification."""

    def __init__(
        self,
        domain_claim_repository: DomainClaimRepository,
        workspace_repository: WorkspaceRepository,
        txt_resolver: TxtRecordResolver,
    ) -> None:
        """Initialize domain claim service.

        Args:
            domain_claim_repository: Domain claim repository
            workspace_repository: Workspace repository (trust flags)
            txt_resolver: DNS TXT resolver
        """
        self.domain_claim_repository = domain_claim_repository
        self.workspace_repository = workspace_repository
        self.txt_resolver = txt_resolver

    async def add_domain(
        self, workspace_id: WorkspaceId, domain: DomainName, created_by: UserId
    ) -> DomainClaim:
        """Claim a domain for a workspace.

        Args:
            workspace_id: Claiming workspace
            domain: Normalized domain
            created_by: Admin adding the claim

        Returns:
            The new pending claim

        Raises:
            DomainAlreadyClaimedError: If any workspace already claims the domain
        """
        with logfire.span(
            "domain_claim_service.add_domain",
            workspace_id=str(workspace_id),
            domain=domain.root,
        ):
            claim = DomainClaim(
                id=DomainClaimId(uuid4()),
                workspace_id=workspace_id,
                domain=domain,
                verification_token=VerificationToken(secrets.token_urlsafe(32)),
                status=DomainStatus.PENDING,
                created_at=datetime.now(timezone.utc),
                created_by=created_by,
            )

            inserted = await self.domain_claim_repository.insert_if_absent(claim)
            if not inserted:
                logfire.warn("Domain already claimed", domain=domain.root)
                raise DomainAlreadyClaimedError(domain.root)

            logfire.info(
                "Domain claim added",
                domain_id=str(claim.id),
                workspace_id=str(workspace_id),
                domain=domain.root,
            )
            return claim

    async def get_domain(self, domain_id: DomainClaimId) -> DomainClaim:
        """Get a claim by ID.

        Raises:
            DomainNotFoundError: If the claim does not exist
        """
        claim = await self.domain_claim_repository.find_by_id(domain_id)
        if claim is None:
            raise DomainNotFoundError(str(domain_id))
        return claim

    async def verify_domain(self, domain_id: DomainClaimId) -> DomainVerificationResult:
        """Check the DNS challenge record of a claim and record the outcome.

        A match verifies the claim (keeping the first ``verified_at``) and
        marks the workspace trusted. A miss marks a pending or failed claim
        as failed; a verified claim stays verified and only the diagnostic
        is reported.

        Args:
            domain_id: Claim to verify

        Returns:
            Verification result with the records found

        Raises:
            DomainNotFoundError: If the claim does not exist
        """
        with logfire.span(
            "domain_claim_service.verify_domain", domain_id=str(domain_id)
        ):
            claim = await self.get_domain(domain_id)
            dns_name = claim.domain.challenge_name
            expected = claim.verification_token.expected_record

            raw_records = await self.txt_resolver.lookup_txt(dns_name)
            records = [normalize_txt_record(r) for r in raw_records]
            matched = any(r.strip() == expected for r in records)

            if matched:
                # Lock only after the lookup so the row lock never waits on DNS
                await self.workspace_repository.lock_for_update(claim.workspace_id)
                verified_at = claim.verified_at or datetime.now(timezone.utc)
                updated = await self.domain_claim_repository.update_status(
                    claim.id, DomainStatus.VERIFIED, verified_at
                )
                if updated is None:
                    raise DomainNotFoundError(str(domain_id))
                await self.workspace_repository.update_trust_flags(
                    claim.workspace_id, domain_verified=True, join_code_enabled=False
                )
                logfire.info(
                    "Domain verified",
                    domain_id=str(claim.id),
                    workspace_id=str(claim.workspace_id),
                    domain=claim.domain.root,
                )
                return DomainVerificationResult(
                    success=True, domain=updated, records_found=records
                )

            if records:
                error = (
                    f"TXT records found at {dns_name} but none match the expected "
                    f"value. Found: {', '.join(records)}"
                )
            else:
                error = (
                    f"No TXT records found at {dns_name}. Please add the DNS record "
                    "and wait for propagation (usually 5-15 minutes)."
                )

            if claim.is_verified:
                updated = claim
            else:
                updated = await self.domain_claim_repository.update_status(
                    claim.id, DomainStatus.FAILED, None
                )
                if updated is None:
                    raise DomainNotFoundError(str(domain_id))

            logfire.warn(
                "Domain verification failed",
                domain_id=str(claim.id),
                domain=claim.domain.root,
                record_count=len(records),
                status=updated.status.value,
            )
            return DomainVerificationResult(
                success=False, domain=updated, error=error, records_found=records
            )

    async def list_domains(self, workspace_id: WorkspaceId) -> list[DomainClaim]:
        """List a workspace's claims in every status, oldest first."""
        with logfire.span(
            "domain_claim_service.list_domains", workspace_id=str(workspace_id)
        ):
            return await self.domain_claim_repository.find_by_workspace(workspace_id)

    async def remove_domain(self, domain_id: DomainClaimId) -> DomainClaim:
        """Delete a claim, freeing its domain.

        Removing the last verified claim restores join codes and clears the
        workspace's domain_verified flag.

        Args:
            domain_id: Claim to remove

        Returns:
            The removed claim

        Raises:
            DomainNotFoundError: If the claim does not exist
        """
        with logfire.span(
            "domain_claim_service.remove_domain", domain_id=str(domain_id)
        ):
            claim = await self.get_domain(domain_id)
            # Serializes with other removals and verifications in the workspace
            await self.workspace_repository.lock_for_update(claim.workspace_id)
            deleted = await self.domain_claim_repository.delete(claim.id)
            if not deleted:
                raise DomainNotFoundError(str(domain_id))

            if claim.is_verified:
                remaining = await self.domain_claim_repository.count_verified(
                    claim.workspace_id
                )
                if remaining == 0:
                    await self.workspace_repository.update_trust_flags(
                        claim.workspace_id,
                        domain_verified=False,
                        join_code_enabled=True,
                    )
                    logfire.info(
                        "Last verified domain removed, join codes re-enabled",
                        workspace_id=str(claim.workspace_id),
                    )

            logfire.info(
                "Domain claim removed",
                domain_id=str(claim.id),
                domain=claim.domain.root,
            )
            return claim

    async def check_email_domain(
        self, workspace_id: WorkspaceId, email: str
    ) -> DomainClaim | None:
        """Find this workspace's verified claim matching an email's domain.

        Args:
            workspace_id: Workspace to check (other workspaces are ignored)
            email: Email address

        Returns:
            The verified claim, or None
        """
        with logfire.span(
            "domain_claim_service.check_email_domain", workspace_id=str(workspace_id)
        ):
            domain = email_domain(email)
            if domain is None:
                return None
            return await self.domain_claim_repository.find_verified_for_workspace(
                workspace_id, domain
            )

    async def get_verification_instructions(
        self, domain_id: DomainClaimId
    ) -> VerificationInstructions:
        """DNS record an admin has to publish for a claim.

        Raises:
            DomainNotFoundError: If the claim does not exist
        """
        claim = await self.get_domain(domain_id)
        return VerificationInstructions(
            record_name=claim.domain.challenge_name,
            record_value=claim.verification_token.expected_record,
            domain=claim.domain,
            status=claim.status,
        )
