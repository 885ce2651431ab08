"""DNS API services."""

from hetznerkit.core.services.dns.records import RecordsApi
from hetznerkit.core.services.dns.zones import ZonesApi

__all__ = ["RecordsApi", "ZonesApi"]
