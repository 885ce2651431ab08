"""Service for the '/primary_ips' endpoint and its actions."""

from typing import Any, Dict, Optional

from hetznerkit.core.services.base import ActionResourceMixin, MutableResourceApi
from hetznerkit.domain.models.cloud import Action, PrimaryIP, PrimaryIPCreateResponse


class PrimaryIPsApi(ActionResourceMixin, MutableResourceApi):
    path = "/primary_ips"
    item_key = "primary_ip"
    collection_key = "primary_ips"

    async def create(self, params: Dict[str, Any]) -> PrimaryIPCreateResponse:
        """Returns the full response; 'action' is only present when assigned on creation."""
        return await self.client.post(self.path, params)

    async def get_by_name(self, name: str) -> Optional[PrimaryIP]:
        return await self._first({"name": name})

    async def assign(self, primary_ip_id: int, assignee_id: int, assignee_type: str = "server") -> Action:
        return await self._post_action(
            primary_ip_id, "assign", {"assignee_id": assignee_id, "assignee_type": assignee_type}
        )

    async def unassign(self, primary_ip_id: int) -> Action:
        return await self._post_action(primary_ip_id, "unassign")

    async def change_dns_ptr(self, primary_ip_id: int, ip: str, dns_ptr: Optional[str]) -> Action:
        return await self._post_action(primary_ip_id, "change_dns_ptr", {"ip": ip, "dns_ptr": dns_ptr})

    async def change_protection(self, primary_ip_id: int, delete: bool) -> Action:
        return await self._post_action(primary_ip_id, "change_protection", {"delete": delete})
