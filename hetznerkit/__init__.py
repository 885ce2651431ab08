"""Async client for the Hetzner Cloud and DNS APIs."""

import logging

from hetznerkit.core.pagination import MAX_RETRIES, fetch_all_pages, fetch_page, paginate
from hetznerkit.domain.errors import (
    ActionError,
    ActionTimeoutError,
    DnsRateLimitError,
    HetznerAPIError,
    HetznerDnsError,
    RateLimitError,
)
from hetznerkit.infrastructure.http.cloud_client import HetznerClient
from hetznerkit.infrastructure.http.dns_client import HetznerDnsClient
from hetznerkit.infrastructure.monitoring.logger_setup import setup_logging
from hetznerkit.infrastructure.resilience.backoff import compute_backoff_ms
from hetznerkit.sdk import Hetzner, HetznerDns

VERSION = "0.1.0"

# Silent unless the application configures logging (see setup_logging)
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MAX_RETRIES",
    "VERSION",
    "ActionError",
    "ActionTimeoutError",
    "DnsRateLimitError",
    "Hetzner",
    "HetznerAPIError",
    "HetznerClient",
    "HetznerDns",
    "HetznerDnsClient",
    "HetznerDnsError",
    "RateLimitError",
    "compute_backoff_ms",
    "fetch_all_pages",
    "fetch_page",
    "paginate",
    "setup_logging",
]
