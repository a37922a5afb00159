"""
Credential verification against the legacy users table.

Every outcome is a soft envelope: unknown users, wrong passwords and store
errors all come back as ``{"success": false, ...}``.
"""

import hashlib
import logging

from lift_gateway import envelope
from lift_gateway.sdk.client import GatewayContext
from lift_gateway.sdk import store as sdk_store
from lift_gateway.utils import drop_missing

logger = logging.getLogger(__name__)


def hash_password(password: str, salt: str) -> str:
    """SHA-256 hex digest of password + salt, as the legacy tracker stores it."""
    return hashlib.sha256((password + salt).encode("utf-8")).hexdigest()


def authenticate_user(ctx: GatewayContext, username: str, password: str) -> str:
    """Verify a username/password pair.

    Returns:
        Envelope JSON: {success, user: {username, created_at}} or {success: false, error}
    """
    logger.info("Authentication attempt for username: %s", username)
    try:
        credential = sdk_store.get_credential(ctx, username)
        if credential is None:
            logger.info("User not found: %s", username)
            return envelope.failure("User not found")

        if hash_password(password, ctx.settings.password_salt) != credential.password_hash:
            logger.info("Password mismatch for username: %s", username)
            return envelope.failure("Invalid password")

        logger.info("Authentication successful for username: %s", username)
        return envelope.success(user=drop_missing({
            "username": credential.username,
            "created_at": credential.created_at,
        }))
    except Exception as e:
        logger.error(f"Authentication error for {username}: {e}", exc_info=True)
        return envelope.failure("Authentication failed")
