"""
Retry driver for Cloudflare API calls.

Connection level failures are retried immediately, with no delay, until
a response arrives or the attempt budget runs out. A response of any
HTTP status ends the loop.
"""

import logging
from typing import Any, Dict, Optional

import requests
from tenacity import (
    RetryError,
    Retrying,
    after_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_none,
)

from ..core.exceptions import TransportFailure
from .transport import HTTPTransport

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10


class RetryDriver:
    """Invoke a transport until it yields a response or the budget is spent."""

    def __init__(self, transport: HTTPTransport, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.transport = transport
        self.max_attempts = max_attempts

    def _retrying(self) -> Retrying:
        return Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_none(),
            retry=retry_if_exception_type(TransportFailure),
            after=after_log(logger, logging.DEBUG),
        )

    def send(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        token: Optional[str] = None,
    ) -> Optional[requests.Response]:
        """
        Send a request through the transport, retrying transport failures.

        Returns:
            The first response obtained, or None if every attempt failed
        """
        try:
            return self._retrying()(
                self.transport.request, method, path, headers, body, token
            )
        except RetryError as e:
            logger.warning(
                f"Giving up on {method} {path} after "
                f"{e.last_attempt.attempt_number} failed attempts"
            )
            return None
