"""Session authentication for API routes."""

from kiiaren.domain.service import JWTService
from kiiaren.interface.error import NotAuthenticatedError
from kiiaren.util.jwt import JWTError, TokenPayload


def authenticate(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Verify the ``auth_token`` cookie.

    Args:
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Token payload of the signed-in user

    Raises:
        NotAuthenticatedError: If the token is missing, invalid or expired
    """
    if not auth_token:
        raise NotAuthenticatedError("Not authenticated")

    try:
        return jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise NotAuthenticatedError(str(e)) from e
