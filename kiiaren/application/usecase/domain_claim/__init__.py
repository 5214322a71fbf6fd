"""Domain claim use cases."""

from kiiaren.application.usecase.domain_claim.add_domain import (
    AddDomainRequest,
    AddDomainResponse,
    AddDomainUseCase,
)
from kiiaren.application.usecase.domain_claim.check_email_domain import (
    CheckEmailDomainRequest,
    CheckEmailDomainResponse,
    CheckEmailDomainUseCase,
)
from kiiaren.application.usecase.domain_claim.get_verification_instructions import (
    GetVerificationInstructionsRequest,
    GetVerificationInstructionsResponse,
    GetVerificationInstructionsUseCase,
)
from kiiaren.application.usecase.domain_claim.items import DomainClaimItem
from kiiaren.application.usecase.domain_claim.list_domains import (
    ListDomainsRequest,
    ListDomainsResponse,
    ListDomainsUseCase,
)
from kiiaren.application.usecase.domain_claim.remove_domain import (
    RemoveDomainRequest,
    RemoveDomainResponse,
    RemoveDomainUseCase,
)
from kiiaren.application.usecase.domain_claim.verify_domain import (
    VerifyDomainRequest,
    VerifyDomainResponse,
    VerifyDomainUseCase,
)

__all__ = [
    "AddDomainRequest",
    "AddDomainResponse",
    "AddDomainUseCase",
    "CheckEmailDomainRequest",
    "CheckEmailDomainResponse",
    "CheckEmailDomainUseCase",
    "DomainClaimItem",
    "GetVerificationInstructionsRequest",
    "GetVerificationInstructionsResponse",
    "GetVerificationInstructionsUseCase",
    "ListDomainsRequest",
    "ListDomainsResponse",
    "ListDomainsUseCase",
    "RemoveDomainRequest",
    "RemoveDomainResponse",
    "RemoveDomainUseCase",
    "VerifyDomainRequest",
    "VerifyDomainResponse",
    "VerifyDomainUseCase",
]
