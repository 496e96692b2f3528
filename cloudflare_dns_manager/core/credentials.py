"""
Credential verification and startup token resolution.
"""

import logging
import os
from typing import Mapping, Optional

from ..utils.validators import validate_api_token
from .dispatcher import RequestDispatcher
from .exceptions import ApiError, CredentialInvalid, TransportExhausted

logger = logging.getLogger(__name__)

VERIFY_ENDPOINT = "user/tokens/verify"
DEFAULT_TOKEN_ENV = "CLOUDFLARE_API_KEY"


class CredentialVerifier:
    """Checks API tokens against the token verification endpoint."""

    def __init__(self, dispatcher: RequestDispatcher):
        self.dispatcher = dispatcher

    def verify(self, token: str) -> bool:
        """Return True if the API accepts token, False otherwise."""
        if not validate_api_token(token):
            return False

        try:
            self.dispatcher.dispatch("GET", VERIFY_ENDPOINT, token=token, ttl_seconds=0)
        except (TransportExhausted, ApiError) as e:
            logger.warning(f"Token verification failed: {e}")
            return False

        return True


def resolve_default_credential(
    dispatcher: RequestDispatcher,
    environ: Optional[Mapping[str, str]] = None,
    env_var: str = DEFAULT_TOKEN_ENV,
) -> str:
    """
    Load the API token from the environment, verify it and install it
    as the dispatcher's default credential.

    Raises:
        CredentialInvalid: If the variable is unset or the token is rejected
    """
    environ = os.environ if environ is None else environ
    token = (environ.get(env_var) or "").strip()

    if not token:
        raise CredentialInvalid(f"No Cloudflare API key found in environment variable {env_var}")

    if not CredentialVerifier(dispatcher).verify(token):
        raise CredentialInvalid("Invalid Cloudflare API key")

    dispatcher.default_token = token
    logger.info("Cloudflare API key verified")
    return token
