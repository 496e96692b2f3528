"""
Cloudflare zone and DNS record provider.

Read-only access to zones and their DNS records. Every call goes through
the request dispatcher, so results are cached per endpoint path.
"""

import logging
from typing import Dict, List, Optional

from ..core.dispatcher import RequestDispatcher
from ..utils.validators import validate_zone_id, validate_zone_name

logger = logging.getLogger(__name__)


class CloudflareProvider:
    """Fetches zones and DNS records from the Cloudflare API."""

    def __init__(self, dispatcher: RequestDispatcher):
        """Initialize provider with a request dispatcher."""
        self.dispatcher = dispatcher

    def get_zones(self) -> List[Dict]:
        """Get all zones visible to the API token."""
        zones = self.dispatcher.dispatch("GET", "zones") or []
        logger.info(f"Retrieved {len(zones)} zones from Cloudflare")
        return zones

    def get_records(self, zone_id: str) -> List[Dict]:
        """Get all DNS records for a zone."""
        if not validate_zone_id(zone_id):
            raise ValueError(f"Invalid Cloudflare zone id: {zone_id!r}")

        records = self.dispatcher.dispatch("GET", f"zones/{zone_id}/dns_records") or []
        logger.info(f"Retrieved {len(records)} DNS records for zone {zone_id}")
        return records

    def find_zone(self, name: str) -> Optional[Dict]:
        """Look up a zone by name among the zones returned by get_zones."""
        if not validate_zone_name(name):
            raise ValueError(f"Invalid zone name: {name!r}")

        wanted = name.lower()
        for zone in self.get_zones():
            if str(zone.get("name", "")).lower() == wanted:
                return zone
        return None

    def get_zones_and_records(self) -> List[Dict]:
        """Get every zone with its DNS records attached under 'records'."""
        data = []
        for zone in self.get_zones():
            records = self.get_records(zone["id"])
            data.append({**zone, "records": records})
        return data
