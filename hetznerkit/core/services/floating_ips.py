"""Service for the '/floating_ips' endpoint and its actions."""

from typing import Optional

from hetznerkit.core.services.base import ActionResourceMixin, MutableResourceApi
from hetznerkit.domain.models.cloud import Action, FloatingIP


class FloatingIPsApi(ActionResourceMixin, MutableResourceApi):
    """Floating IPs."""

    path = "/floating_ips"
    item_key = "floating_ip"
    collection_key = "floating_ips"

    async def get_by_name(self, name: str) -> Optional[FloatingIP]:
        return await self._first({"name": name})

    async def assign(self, floating_ip_id: int, server: int) -> Action:
        return await self._post_action(floating_ip_id, "assign", {"server": server})

    async def unassign(self, floating_ip_id: int) -> Action:
        return await self._post_action(floating_ip_id, "unassign")

    async def change_dns_ptr(self, floating_ip_id: int, ip: str, dns_ptr: Optional[str]) -> Action:
        return await self._post_action(floating_ip_id, "change_dns_ptr", {"ip": ip, "dns_ptr": dns_ptr})

    async def change_protection(self, floating_ip_id: int, delete: bool) -> Action:
        return await self._post_action(floating_ip_id, "change_protection", {"delete": delete})
