"""HMAC utilities for webhook signature validation."""

import hmac
import hashlib
import logging
from typing import Union

logger = logging.getLogger(__name__)


def _key_bytes(secret: Union[str, bytes]) -> bytes:
    if isinstance(secret, bytes):
        return secret
    return secret.encode('utf-8')


def compute_hmac_sha256(data: bytes, secret: Union[str, bytes]) -> str:
    """Compute the lowercase hex HMAC-SHA256 signature for given data and secret."""
    try:
        return hmac.new(_key_bytes(secret), data, hashlib.sha256).hexdigest()
    except Exception as e:
        logger.error(f"Error computing HMAC signature: {e}")
        raise


def verify_hmac_signature(data: bytes, signature: str, secret: Union[str, bytes]) -> bool:
    """Verify a ``linear-signature`` value against the raw request body.

    ``data`` must be the body exactly as received; re-serialized JSON will not
    match. Any failure is reported as ``False``.
    """
    if not secret:
        logger.error("Webhook secret is empty, rejecting signature")
        return False
    if not signature:
        return False

    try:
        computed_signature = compute_hmac_sha256(data, secret)
        return hmac.compare_digest(
            computed_signature.encode('ascii'),
            signature.encode('utf-8'),
        )
    except Exception as e:
        logger.error(f"Error verifying HMAC signature: {e}")
        return False
