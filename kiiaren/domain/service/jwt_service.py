"""Session token domain service."""

import logfire

from kiiaren.config import AuthSettings
from kiiaren.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks the ``auth_token`` session cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str | None = None) -> str:
        """Issue a session token for a signed-in user."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a session token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Session token rejected", reason=str(e))
                raise
            logfire.info("Session token verified", user_id=payload.user_id)
            return payload
