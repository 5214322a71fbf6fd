"""Session token encoding.

Sessions are HS256 JWTs carrying the user id and the email address the
identity provider verified at sign-in. The email drives auto-join by
email domain, so it is part of the signed payload.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from kiiaren.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded session token."""

    user_id: str
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """Session token could not be verified."""

    pass


def create_token(user_id: str, email: str | None, settings: AuthSettings) -> str:
    """Encode a session token expiring after ``settings.jwt_expiry_days``."""
    payload = TokenPayload(
        user_id=user_id,
        email=email,
        exp=datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    )
    return jwt.encode(
        payload.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a session token.

    Raises:
        JWTError: If the signature is invalid or the token has expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload.model_validate(claims)
