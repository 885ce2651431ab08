"""Shared plumbing for resource services.

Each service binds one collection endpoint ('/servers', '/zones', ...) to
the transport and to the pagination engine.
"""

from typing import Any, AsyncIterator, Dict, List, Optional, Union

from hetznerkit.core.pagination import fetch_all_pages, paginate
from hetznerkit.domain.interfaces.transport import Transport
from hetznerkit.domain.models.common import Page, QueryParams, RecordID, ResourceID, ZoneID

# Cloud ids are integers, DNS ids are strings
Identifier = Union[ResourceID, ZoneID, RecordID]


class ResourceApi:
    """Read operations common to every collection endpoint."""

    path: str = ""
    item_key: str = ""        # single record key, e.g. 'server'
    collection_key: str = ""  # list key in a page, e.g. 'servers'

    def __init__(self, client: Transport):
        self.client = client

    def _item_path(self, resource_id: Identifier) -> str:
        return f"{self.path}/{resource_id}"

    async def get(self, resource_id: Identifier) -> Dict[str, Any]:
        response = await self.client.get(self._item_path(resource_id))
        return response[self.item_key]

    async def list(self, params: Optional[QueryParams] = None) -> Page:
        """Returns one raw page, including its pagination metadata."""
        return await self.client.get(self.path, params or {})

    def iterate(self, params: Optional[QueryParams] = None) -> AsyncIterator[Any]:
        """Lazily iterates over all pages of the collection."""
        return paginate(self.client, self.path, self.collection_key, params)

    async def list_all(self, params: Optional[QueryParams] = None) -> List[Any]:
        """Fetches every page of the collection into one list."""
        return await fetch_all_pages(self.client, self.path, self.collection_key, params)

    async def _first(self, params: QueryParams) -> Optional[Dict[str, Any]]:
        response = await self.list(params)
        items = response.get(self.collection_key) or []
        return items[0] if items else None


class MutableResourceApi(ResourceApi):
    """Adds create/update/delete for collections that support them."""

    async def create(self, params: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.client.post(self.path, params)
        return response[self.item_key]

    async def update(self, resource_id: Identifier, params: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.client.put(self._item_path(resource_id), params)
        return response[self.item_key]

    async def delete(self, resource_id: Identifier) -> None:
        await self.client.delete(self._item_path(resource_id))


class ActionResourceMixin:
    """Helper for '/{collection}/{id}/actions/{command}' endpoints."""

    client: Transport
    path: str

    async def _post_action(self, resource_id: ResourceID, command: str, body: Any = None) -> Dict[str, Any]:
        response = await self.client.post(f"{self.path}/{resource_id}/actions/{command}", body)
        return response["action"]
