"""Service for the '/networks' endpoint and its network actions."""

from typing import Optional

from hetznerkit.core.services.base import ActionResourceMixin, MutableResourceApi
from hetznerkit.domain.models.cloud import Action, Network, Subnet


class NetworksApi(ActionResourceMixin, MutableResourceApi):
    """Private networks."""

    path = "/networks"
    item_key = "network"
    collection_key = "networks"

    async def get_by_name(self, name: str) -> Optional[Network]:
        return await self._first({"name": name})

    async def add_subnet(self, network_id: int, subnet: Subnet) -> Action:
        return await self._post_action(network_id, "add_subnet", subnet)

    async def delete_subnet(self, network_id: int, ip_range: str) -> Action:
        return await self._post_action(network_id, "delete_subnet", {"ip_range": ip_range})

    async def add_route(self, network_id: int, destination: str, gateway: str) -> Action:
        return await self._post_action(network_id, "add_route", {"destination": destination, "gateway": gateway})

    async def delete_route(self, network_id: int, destination: str, gateway: str) -> Action:
        return await self._post_action(network_id, "delete_route", {"destination": destination, "gateway": gateway})

    async def change_ip_range(self, network_id: int, ip_range: str) -> Action:
        return await self._post_action(network_id, "change_ip_range", {"ip_range": ip_range})

    async def change_protection(self, network_id: int, delete: bool) -> Action:
        return await self._post_action(network_id, "change_protection", {"delete": delete})
