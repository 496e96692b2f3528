"""
Behave environment configuration for Cloudflare DNS Manager scenarios.

The HTTP session is mocked, so no scenario talks to the real API.
"""

import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class FakeClock:
    """Manually advanced clock driving cache expiry."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def before_all(context):
    """Set up values shared by all scenarios."""
    context.api_base = "https://api.cloudflare.com/client/v4"
    context.default_token = "default-token"
    context.zones = [{"id": "023e105f4ecef8ad9ca31a8372d0c353", "name": "example.com"}]
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Reset per-scenario state."""
    context.clock = FakeClock()
    context.result = None
    context.error = None
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Log the end of a scenario."""
    logger.info(f"Completed scenario: {scenario.name}")
