"""
Utility functions and helpers.

This package contains input validation shared by the API client and CLI.
"""

from .validators import validate_api_token, validate_zone_id, validate_zone_name

__all__ = ["validate_api_token", "validate_zone_id", "validate_zone_name"]
