"""
Request Dispatcher - single entry point for Cloudflare API calls

This module resolves cache hits, sends everything else through the retry
driver, checks the HTTP status, unwraps the API response envelope and
updates the cache on the way back.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..providers.retry import DEFAULT_MAX_ATTEMPTS, RetryDriver
from ..providers.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HTTPTransport
from .cache import ResponseCache
from .exceptions import ApiError, TransportExhausted

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL = 300


class RequestDispatcher:
    """Cached, retried and unwrapped access to the Cloudflare API."""

    def __init__(
        self,
        retry_driver: RetryDriver,
        cache: Optional[ResponseCache] = None,
        default_ttl: float = DEFAULT_CACHE_TTL,
    ):
        """Initialize dispatcher with a retry driver and its own cache."""
        self.retry_driver = retry_driver
        self.cache = cache if cache is not None else ResponseCache()
        self.default_ttl = default_ttl

    @classmethod
    def from_config(cls, api_config: Optional[Dict] = None) -> "RequestDispatcher":
        """Build transport, retry driver and cache from the 'api' config section."""
        api_config = api_config or {}
        transport = HTTPTransport(
            base_url=api_config.get("base_url", DEFAULT_BASE_URL),
            timeout=api_config.get("timeout", DEFAULT_TIMEOUT),
        )
        retry_driver = RetryDriver(
            transport, max_attempts=api_config.get("max_attempts", DEFAULT_MAX_ATTEMPTS)
        )
        return cls(retry_driver, default_ttl=api_config.get("cache_ttl", DEFAULT_CACHE_TTL))

    @property
    def default_token(self) -> Optional[str]:
        """Token used by calls that do not pass one explicitly."""
        return self.retry_driver.transport.default_token

    @default_token.setter
    def default_token(self, token: Optional[str]) -> None:
        self.retry_driver.transport.default_token = token

    def dispatch(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        token: Optional[str] = None,
        ttl_seconds: Optional[float] = None,
    ) -> Any:
        """
        Perform one API call and return the unwrapped 'result' payload.

        Args:
            method: HTTP method
            path: Endpoint path relative to the API base, also the cache key
            headers: Extra request headers
            body: JSON-serializable request body
            token: API token overriding the default credential
            ttl_seconds: Seconds a cached result stays valid; 0 bypasses the cache

        Returns:
            The envelope's 'result' value

        Raises:
            TransportExhausted: If no response was obtained
            ApiError: If the response status is not 2xx or the body is not JSON
        """
        if ttl_seconds is None:
            ttl_seconds = self.default_ttl

        # A zero TTL bypasses the cache for reads too, not only for writes.
        if ttl_seconds > 0:
            entry = self.cache.lookup(path)
            if entry is not None and not self.cache.is_expired(entry, ttl_seconds):
                logger.debug(f"Cache hit for {path}")
                return entry.result

        logger.info(f"Requesting {method} {path}")
        response = self.retry_driver.send(method, path, headers, body, token)

        if response is None:
            raise TransportExhausted(path, self.retry_driver.max_attempts)

        if not 200 <= response.status_code < 300:
            error = ApiError(path, response.status_code, self._envelope_errors(response))
            logger.error(str(error))
            raise error

        try:
            envelope = response.json()
        except ValueError as e:
            raise ApiError(
                path,
                response.status_code,
                message=f"Cloudflare API returned a non-JSON body on path {path}",
            ) from e

        result = envelope.get("result") if isinstance(envelope, dict) else None

        self.cache.store(path, result, ttl_seconds)
        return result

    @staticmethod
    def _envelope_errors(response: requests.Response) -> list:
        """Pull the 'errors' list out of an error response, if it has one."""
        try:
            envelope = response.json()
        except ValueError:
            return []
        if isinstance(envelope, dict) and isinstance(envelope.get("errors"), list):
            return envelope["errors"]
        return []
