"""Session token verification."""

import logfire

from forum.config import AuthSettings
from forum.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Verifies the session tokens minted by the identity provider."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Decode ``token`` and return its claims.

        Raises:
            JWTError: If the token is malformed, badly signed or expired
        """
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("Session token rejected", reason=str(e))
            raise

        logfire.debug("Session token verified", external_id=payload.sub)
        return payload
