"""
Exceptions raised while talking to the Cloudflare API.

Only TransportFailure is ever retried. The others end the dispatch they
occur in and reach the caller unchanged.
"""

from typing import List, Optional


class CloudflareAPIError(Exception):
    """Base class for all API dispatch errors."""


class TransportFailure(CloudflareAPIError):
    """A single attempt failed before any HTTP response was received."""


class TransportExhausted(CloudflareAPIError):
    """No response was obtained within the retry budget."""

    def __init__(self, path: str, attempts: int):
        super().__init__(
            f"Failed to send request to Cloudflare API on path {path} "
            f"after {attempts} attempts"
        )
        self.path = path
        self.attempts = attempts


class ApiError(CloudflareAPIError):
    """The API answered, but not with a success status."""

    def __init__(
        self,
        path: str,
        status_code: int,
        errors: Optional[List] = None,
        message: Optional[str] = None,
    ):
        text = message or (
            f"Failed to send request to Cloudflare API on path {path} "
            f"with status {status_code}"
        )
        if errors:
            details = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in errors
            )
            text = f"{text}: {details}"
        super().__init__(text)
        self.path = path
        self.status_code = status_code
        self.errors = errors or []


class CredentialInvalid(CloudflareAPIError):
    """No usable API token is available."""
