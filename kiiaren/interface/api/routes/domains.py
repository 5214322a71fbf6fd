"""Domain verification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from kiiaren.application.usecase.domain_claim import (
    AddDomainRequest,
    AddDomainResponse,
    AddDomainUseCase,
    CheckEmailDomainRequest,
    CheckEmailDomainResponse,
    CheckEmailDomainUseCase,
    GetVerificationInstructionsRequest,
    GetVerificationInstructionsResponse,
    GetVerificationInstructionsUseCase,
    ListDomainsRequest,
    ListDomainsResponse,
    ListDomainsUseCase,
    RemoveDomainRequest,
    RemoveDomainResponse,
    RemoveDomainUseCase,
    VerifyDomainRequest,
    VerifyDomainResponse,
    VerifyDomainUseCase,
)
from kiiaren.domain.service import JWTService
from kiiaren.interface.api.auth import authenticate

router = APIRouter(tags=["domains"], route_class=DishkaRoute)


class AddDomainAPIRequest(BaseModel):
    """API request for claiming a domain."""

    domain: str = Field(min_length=1, max_length=255)


@router.get("/workspaces/{workspace_id}/domains", response_model=ListDomainsResponse)
async def list_domains(
    workspace_id: UUID,
    list_domains_use_case: FromDishka[ListDomainsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListDomainsResponse:
    """List the workspace's domain claims in every status (admins only)."""
    payload = authenticate(jwt_service, auth_token)
    return await list_domains_use_case.execute(
        ListDomainsRequest(workspace_id=str(workspace_id), requester_id=payload.user_id)
    )


@router.post(
    "/workspaces/{workspace_id}/domains",
    response_model=AddDomainResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_domain(
    workspace_id: UUID,
    request: AddDomainAPIRequest,
    add_domain_use_case: FromDishka[AddDomainUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddDomainResponse:
    """Claim an email domain for the workspace (admins only).

    Args:
        workspace_id: Claiming workspace
        request: Domain to claim
        add_domain_use_case: Add domain use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        The pending claim with the TXT record to publish

    Example:
        POST /workspaces/{id}/domains {"domain": "Acme.com."}

        Response:
        {
            "domain": {"domain": "acme.com", "status": "pending", ...},
            "record_name": "_kiiaren-verification.acme.com",
            "record_value": "kiiaren-verification=3q2-..."
        }
    """
    payload = authenticate(jwt_service, auth_token)
    return await add_domain_use_case.execute(
        AddDomainRequest(
            workspace_id=str(workspace_id),
            domain=request.domain,
            requester_id=payload.user_id,
        )
    )


@router.get(
    "/workspaces/{workspace_id}/domains/check",
    response_model=CheckEmailDomainResponse,
)
async def check_email_domain(
    workspace_id: UUID,
    check_email_domain_use_case: FromDishka[CheckEmailDomainUseCase],
    email: str = Query(min_length=3, max_length=320),
) -> CheckEmailDomainResponse:
    """Whether the workspace verified the domain of an email address.

    Public: used by sign-up flows before the user has a session.
    """
    return await check_email_domain_use_case.execute(
        CheckEmailDomainRequest(workspace_id=str(workspace_id), email=email)
    )


@router.get(
    "/domains/{domain_id}/instructions",
    response_model=GetVerificationInstructionsResponse,
)
async def get_verification_instructions(
    domain_id: UUID,
    use_case: FromDishka[GetVerificationInstructionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVerificationInstructionsResponse:
    """DNS record the admin has to publish for a claim."""
    payload = authenticate(jwt_service, auth_token)
    return await use_case.execute(
        GetVerificationInstructionsRequest(
            domain_id=str(domain_id), requester_id=payload.user_id
        )
    )


@router.post("/domains/{domain_id}/verify", response_model=VerifyDomainResponse)
async def verify_domain(
    domain_id: UUID,
    verify_domain_use_case: FromDishka[VerifyDomainUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VerifyDomainResponse:
    """Look up the challenge record and update the claim (admins only).

    A record that is missing or wrong is reported with 200 and
    ``success: false``.
    """
    payload = authenticate(jwt_service, auth_token)
    return await verify_domain_use_case.execute(
        VerifyDomainRequest(domain_id=str(domain_id), requester_id=payload.user_id)
    )


@router.delete("/domains/{domain_id}", response_model=RemoveDomainResponse)
async def remove_domain(
    domain_id: UUID,
    remove_domain_use_case: FromDishka[RemoveDomainUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveDomainResponse:
    """Remove a domain claim (admins only)."""
    payload = authenticate(jwt_service, auth_token)
    return await remove_domain_use_case.execute(
        RemoveDomainRequest(domain_id=str(domain_id), requester_id=payload.user_id)
    )
