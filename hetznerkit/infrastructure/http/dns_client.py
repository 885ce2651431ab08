"""Transport for the Hetzner DNS API.

The DNS API authenticates with an 'Auth-API-Token' header instead of a
Bearer token, reports integer error codes and may answer successful
requests with an empty body.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from hetznerkit.domain.errors import DnsRateLimitError, HetznerDnsError
from hetznerkit.infrastructure.http.base_client import (
    DEFAULT_TIMEOUT_SECONDS,
    BaseHttpClient,
    parse_retry_after,
)

logger = logging.getLogger(__name__)

DEFAULT_DNS_BASE_URL = "https://dns.hetzner.com/api/v1"


class HetznerDnsClient(BaseHttpClient):
    """HTTP client for the DNS API."""

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(token, DEFAULT_DNS_BASE_URL, base_url, timeout, http_client)
        logger.info(f"HetznerDnsClient initialized for {self.base_url}")

    def get_auth_headers(self) -> Dict[str, str]:
        return {"Auth-API-Token": self.token}

    def parse_response(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        return response.json()

    def handle_error(self, response: httpx.Response) -> HetznerDnsError:
        # Body is either {"error": {"message", "code"}} or {"message": "..."}
        message = f"HTTP {response.status_code}: {response.reason_phrase}"
        code = 0
        try:
            error_data = response.json()
            error_info = error_data.get("error") or {}
            if error_info.get("message"):
                message = error_info["message"]
                code = error_info.get("code", 0)
            elif error_data.get("message"):
                message = error_data["message"]
        except (ValueError, AttributeError):
            logger.debug(f"Unparseable DNS error body for HTTP {response.status_code}")

        if response.status_code == 429:
            return DnsRateLimitError(message, code, parse_retry_after(response))
        return HetznerDnsError(message, code, response.status_code)
