"""Read-only catalog services: locations, datacenters, server types,
load balancer types and ISOs."""

from typing import Optional

from hetznerkit.core.services.base import ResourceApi
from hetznerkit.domain.models.cloud import Datacenter, Iso, LoadBalancerType, Location, ServerType


class LocationsApi(ResourceApi):
    path = "/locations"
    item_key = "location"
    collection_key = "locations"

    async def get_by_name(self, name: str) -> Optional[Location]:
        return await self._first({"name": name})


class DatacentersApi(ResourceApi):
    path = "/datacenters"
    item_key = "datacenter"
    collection_key = "datacenters"

    async def get_by_name(self, name: str) -> Optional[Datacenter]:
        return await self._first({"name": name})


class ServerTypesApi(ResourceApi):
    path = "/server_types"
    item_key = "server_type"
    collection_key = "server_types"

    async def get_by_name(self, name: str) -> Optional[ServerType]:
        return await self._first({"name": name})


class LoadBalancerTypesApi(ResourceApi):
    path = "/load_balancer_types"
    item_key = "load_balancer_type"
    collection_key = "load_balancer_types"

    async def get_by_name(self, name: str) -> Optional[LoadBalancerType]:
        return await self._first({"name": name})


class IsosApi(ResourceApi):
    """ISO images that can be attached to servers (see ServersApi.attach_iso)."""

    path = "/isos"
    item_key = "iso"
    collection_key = "isos"

    async def get_by_name(self, name: str) -> Optional[Iso]:
        return await self._first({"name": name})
