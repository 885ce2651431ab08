"""Interface for the HTTP transport used by every resource service.

Defines the contract the pagination engine, the action poller and the
resource services depend on. Concrete transports live in the
infrastructure layer (Cloud API, DNS API).
"""

import abc
from typing import Any, Optional

from ..models.common import QueryParams


class Transport(abc.ABC):
    """Abstract Base Class for a JSON-over-HTTP API transport."""

    @abc.abstractmethod
    async def get(self, path: str, params: Optional[QueryParams] = None) -> Any:
        """Performs a GET request.

        Args:
            path: Endpoint path relative to the API base URL (e.g. '/servers').
            params: Optional query parameters. None values are omitted,
                list values are sent as repeated keys.

        Returns:
            The decoded JSON body, or None for empty responses.

        Raises:
            RateLimitError: If the API answered with HTTP 429.
            HetznerAPIError: For any other unsuccessful response.
        """
        pass

    @abc.abstractmethod
    async def post(self, path: str, body: Any = None) -> Any:
        """Performs a POST request with an optional JSON body."""
        pass

    @abc.abstractmethod
    async def put(self, path: str, body: Any = None) -> Any:
        """Performs a PUT request with an optional JSON body."""
        pass

    @abc.abstractmethod
    async def delete(self, path: str) -> Any:
        """Performs a DELETE request. Returns None for empty responses."""
        pass
