"""
Validators - input checks for values that end up in API paths

Zone identifiers and names are interpolated into endpoint paths, which
also serve as cache keys, so they are checked before any request is made.
"""

import logging
import re

logger = logging.getLogger(__name__)

ZONE_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")
LABEL_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")


def validate_zone_id(zone_id: str) -> bool:
    """
    Validate a Cloudflare zone identifier.

    Args:
        zone_id: The identifier to validate, 32 lowercase hex characters

    Returns:
        True if valid, False otherwise
    """
    if not zone_id or not isinstance(zone_id, str):
        return False

    if not ZONE_ID_PATTERN.match(zone_id):
        logger.warning(f"Invalid zone id: {zone_id}")
        return False

    return True


def validate_zone_name(zone: str) -> bool:
    """
    Validate a DNS zone name such as 'example.com'.

    Args:
        zone: The zone name to validate

    Returns:
        True if valid, False otherwise
    """
    if not zone or not isinstance(zone, str):
        return False

    if len(zone) > 253:
        logger.warning(f"Zone name too long: {zone}")
        return False

    labels = zone.lower().split(".")
    if len(labels) < 2:
        logger.warning(f"Zone name must have at least 2 labels: {zone}")
        return False

    for label in labels:
        if len(label) > 63 or not LABEL_PATTERN.match(label):
            logger.warning(f"Invalid label '{label}' in zone name: {zone}")
            return False

    return True


def validate_api_token(token: str) -> bool:
    """Check that token is a non-empty string usable in a bearer header."""
    if not token or not isinstance(token, str):
        return False

    # Header values are encoded as latin-1; anything outside printable
    # ASCII fails in http.client rather than at the API.
    if not (token.isascii() and token.isprintable()):
        logger.warning("API token contains non-printable or non-ASCII characters")
        return False

    return not any(ch.isspace() for ch in token)
