"""
Cloudflare DNS Manager - cached, retried access to the Cloudflare API

Read zones and DNS records through a single request dispatcher that
handles token authentication, response caching and transport retries.
"""

__version__ = "1.0.0"
__author__ = "Cloudflare DNS Manager Team"
__description__ = "Cached and retried access to Cloudflare zones and DNS records"

from .core.dispatcher import RequestDispatcher
from .core.credentials import CredentialVerifier, resolve_default_credential
from .core.exceptions import ApiError, CredentialInvalid, TransportExhausted
from .providers.cloudflare_provider import CloudflareProvider

__all__ = [
    "RequestDispatcher",
    "CredentialVerifier",
    "resolve_default_credential",
    "CloudflareProvider",
    "ApiError",
    "CredentialInvalid",
    "TransportExhausted",
]
