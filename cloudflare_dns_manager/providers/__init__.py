"""
Cloudflare API access layers.

This package contains the HTTP transport, the retry driver that wraps it,
and the zone/record provider built on the request dispatcher.
"""

from .transport import HTTPTransport
from .retry import RetryDriver

__all__ = ["HTTPTransport", "RetryDriver"]
