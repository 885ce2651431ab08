"""Base implementation of the Transport interface on top of httpx.

Builds URLs and query strings, attaches auth headers, decodes JSON and
delegates error translation to the API-specific subclasses.
"""

import abc
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from hetznerkit.domain.errors import HetznerAPIError
from hetznerkit.domain.interfaces.transport import Transport
from hetznerkit.domain.models.common import QueryParams

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query_params(params: Optional[QueryParams]) -> List[Tuple[str, str]]:
    """Encodes query parameters as an ordered list of key/value pairs.

    Scalars produce one pair, lists produce one pair per element in order,
    and None values are dropped entirely.
    """
    pairs: List[Tuple[str, str]] = []
    if not params:
        return pairs
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _format_query_value(item)) for item in value)
        else:
            pairs.append((key, _format_query_value(value)))
    return pairs


def parse_retry_after(response: httpx.Response) -> int:
    """Reads the Retry-After header in whole seconds, 0 if absent or not numeric.

    Fractional values are truncated ("1.5" gives 1).
    """
    raw_value = response.headers.get("Retry-After", "0")
    try:
        return int(float(raw_value))
    except (ValueError, OverflowError):
        logger.debug(f"Ignoring non-numeric Retry-After header: {raw_value!r}")
        return 0


class BaseHttpClient(Transport):
    """Shared HTTP plumbing for the Cloud and DNS API clients."""

    def __init__(
        self,
        token: str,
        default_base_url: str,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initializes the client.

        Args:
            token: API token used by get_auth_headers().
            default_base_url: Base URL used when base_url is not given.
            base_url: Optional override of the API base URL.
            timeout: Request timeout in seconds for the owned httpx client.
            http_client: Optional pre-configured httpx.AsyncClient. The caller
                keeps ownership of an injected client; aclose() leaves it open.
        """
        self.token = token
        self.base_url = base_url or default_base_url
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @abc.abstractmethod
    def get_auth_headers(self) -> Dict[str, str]:
        """Returns the authentication headers for this API."""
        pass

    @abc.abstractmethod
    def handle_error(self, response: httpx.Response) -> HetznerAPIError:
        """Translates an unsuccessful response into the error to raise."""
        pass

    def parse_response(self, response: httpx.Response) -> Any:
        """Decodes a successful response. 204 responses yield None."""
        if response.status_code == 204:
            return None
        return response.json()

    def build_url(self, path: str) -> str:
        return self.base_url + path

    async def get(self, path: str, params: Optional[QueryParams] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self._request("POST", path, body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self._request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[QueryParams] = None,
    ) -> Any:
        url = self.build_url(path)
        headers = self.get_auth_headers()
        request_kwargs: Dict[str, Any] = {
            "headers": headers,
            "params": encode_query_params(params),
        }
        if body is not None:
            request_kwargs["json"] = body

        logger.debug(f"{method} {url} params={request_kwargs['params']}")
        try:
            response = await self._http.request(method, url, **request_kwargs)
        except httpx.TransportError as e:
            logger.error(f"Transport error on {method} {path}: {type(e).__name__} - {e}")
            raise HetznerAPIError(f"Connection error: {e}", "connection_error", None) from e

        if not response.is_success:
            error = self.handle_error(response)
            if response.status_code == 429:
                logger.warning(f"Rate limited on {method} {path} (retry after {getattr(error, 'retry_after', 0)}s)")
            else:
                logger.error(f"{method} {path} failed with HTTP {response.status_code}: {error}")
            raise error

        return self.parse_response(response)

    async def aclose(self) -> None:
        """Closes the underlying httpx client if this instance created it."""
        if self._owns_http_client:
            await self._http.aclose()
