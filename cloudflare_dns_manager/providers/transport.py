"""
HTTP transport for the Cloudflare v4 API.

This module performs exactly one HTTP call per request. It adds the
bearer authentication and JSON content headers, and turns connection
level problems into TransportFailure. Status codes are left for the
dispatcher to interpret.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..core.exceptions import CredentialInvalid, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT = 30


class HTTPTransport:
    """Single-shot HTTP client bound to one API base URL."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        default_token: Optional[str] = None,
    ):
        """Initialize transport with base URL, timeout and optional session."""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.default_token = default_token

    def build_url(self, path: str) -> str:
        """Join an endpoint path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def build_headers(
        self, token: Optional[str] = None, headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, str]:
        """Build request headers, caller headers applied last."""
        bearer = token or self.default_token
        if not bearer:
            raise CredentialInvalid("No Cloudflare API token available")

        merged = {
            "Authorization": f"Bearer {bearer}",
            "Content-Type": "application/json",
        }
        merged.update(headers or {})
        return merged

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        token: Optional[str] = None,
    ) -> requests.Response:
        """Send one request and return the raw response, whatever its status."""
        url = self.build_url(path)
        request_headers = self.build_headers(token, headers)

        kwargs = {"headers": request_headers, "timeout": self.timeout}
        if body is not None:
            kwargs["json"] = body

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise TransportFailure(f"{method} {path} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response
