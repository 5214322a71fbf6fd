"""Domain services."""

from .access_service import AccessService
from .base import Service
from .domain_claim_service import (
    DomainClaimService,
    DomainVerificationResult,
    TxtRecordResolver,
    email_domain,
    normalize_txt_record,
    parse_domain,
)
from .invite_link_service import (
    InviteLinkService,
    InviteLinkValidation,
    InviteRedemptionResult,
)
from .jwt_service import JWTService
from .workspace_service import AutoJoinResult, WorkspaceService, decide_auto_join

__all__ = [
    "AccessService",
    "AutoJoinResult",
    "DomainClaimService",
    "DomainVerificationResult",
    "InviteLinkService",
    "InviteLinkValidation",
    "InviteRedemptionResult",
    "JWTService",
    "Service",
    "TxtRecordResolver",
    "WorkspaceService",
    "decide_auto_join",
    "email_domain",
    "normalize_txt_record",
    "parse_domain",
]
