"""JWT helpers for identity-provider session tokens.

The ``sub`` claim carries the provider's user id, which maps to
``User.external_id``. Production tokens are minted by the provider with the
shared ``AuthSettings.jwt_secret``; ``create_token`` exists for tests and
local tooling.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims the API relies on."""

    sub: str
    exp: datetime
    iat: datetime | None = None


class JWTError(Exception):
    """Raised when a token cannot be trusted."""

    pass


def create_token(external_id: str, settings: AuthSettings) -> str:
    """Mint a token for ``external_id`` valid for ``settings.jwt_expiry_days``."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": external_id,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify signature and expiry, then decode the claims.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Decoded claims

    Raises:
        JWTError: If the token is expired, badly signed or lacks ``sub``
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    return TokenPayload(**claims)
