"""
Core API dispatch functionality.

This package contains the response cache, the request dispatcher and
startup credential verification.
"""

from .exceptions import (
    ApiError,
    CloudflareAPIError,
    CredentialInvalid,
    TransportExhausted,
    TransportFailure,
)
from .cache import CacheEntry, ResponseCache
from .dispatcher import RequestDispatcher
from .credentials import CredentialVerifier, resolve_default_credential

__all__ = [
    "ApiError",
    "CacheEntry",
    "CloudflareAPIError",
    "CredentialInvalid",
    "CredentialVerifier",
    "RequestDispatcher",
    "ResponseCache",
    "TransportExhausted",
    "TransportFailure",
    "resolve_default_credential",
]
