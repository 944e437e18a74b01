"""Webhook signature helpers."""

import hashlib
import hmac

from forum.util.error import SignatureError


def sign_payload(body: bytes, secret: str) -> str:
    """Compute the hex HMAC-SHA256 signature for a webhook body."""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify_signature(body: bytes, signature: str | None, secret: str) -> None:
    """Verify a webhook signature.

    Args:
        body: Raw request body
        signature: Hex digest sent by the identity provider
        secret: Shared webhook secret

    Raises:
        SignatureError: If the signature is missing or does not match
    """
    if not signature:
        raise SignatureError("Missing webhook signature")

    expected = sign_payload(body, secret)
    if not hmac.compare_digest(expected, signature):
        raise SignatureError("Invalid webhook signature")
