"""Transport for the Hetzner Cloud API (Bearer token auth)."""

import logging
from typing import Dict, Optional

import httpx

from hetznerkit.domain.errors import HetznerAPIError, RateLimitError
from hetznerkit.infrastructure.http.base_client import (
    DEFAULT_TIMEOUT_SECONDS,
    BaseHttpClient,
    parse_retry_after,
)

logger = logging.getLogger(__name__)

DEFAULT_CLOUD_BASE_URL = "https://api.hetzner.cloud/v1"


class HetznerClient(BaseHttpClient):
    """HTTP client for the Cloud API."""

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(token, DEFAULT_CLOUD_BASE_URL, base_url, timeout, http_client)
        logger.info(f"HetznerClient initialized for {self.base_url}")

    def get_auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def handle_error(self, response: httpx.Response) -> HetznerAPIError:
        # Body shape: {"error": {"code": "...", "message": "..."}}
        message = f"HTTP {response.status_code}: {response.reason_phrase}"
        code = "unknown"
        try:
            error_info = response.json()["error"]
            message = error_info["message"]
            code = error_info["code"]
        except (ValueError, KeyError, TypeError):
            logger.debug(f"Unparseable error body for HTTP {response.status_code}")

        if response.status_code == 429:
            return RateLimitError(message, code, parse_retry_after(response))
        return HetznerAPIError(message, code, response.status_code)
