"""Service for the '/servers' endpoint and its server actions."""

from typing import Any, Dict, List, Optional

from hetznerkit.core.services.base import ActionResourceMixin, MutableResourceApi
from hetznerkit.domain.models.cloud import Action, Server, ServerCreateResponse


class ServersApi(ActionResourceMixin, MutableResourceApi):
    """Servers endpoint."""

    path = "/servers"
    item_key = "server"
    collection_key = "servers"

    async def create(self, params: Dict[str, Any]) -> ServerCreateResponse:
        """Creates a server. Returns the full response (server, action, root_password)."""
        return await self.client.post(self.path, params)

    async def delete(self, server_id: int) -> Action:
        response = await self.client.delete(self._item_path(server_id))
        return response["action"]

    async def get_by_name(self, name: str) -> Optional[Server]:
        return await self._first({"name": name})

    # --- Power ---

    async def power_on(self, server_id: int) -> Action:
        return await self._post_action(server_id, "poweron")

    async def power_off(self, server_id: int) -> Action:
        return await self._post_action(server_id, "poweroff")

    async def reboot(self, server_id: int) -> Action:
        return await self._post_action(server_id, "reboot")

    async def reset(self, server_id: int) -> Action:
        return await self._post_action(server_id, "reset")

    async def shutdown(self, server_id: int) -> Action:
        return await self._post_action(server_id, "shutdown")

    # --- Rescue, images and ISOs ---

    async def enable_rescue(
        self,
        server_id: int,
        rescue_type: Optional[str] = None,
        ssh_keys: Optional[List[int]] = None,
    ) -> Dict[str, Any]:
        """Returns {'action': ..., 'root_password': ...}."""
        body: Dict[str, Any] = {}
        if rescue_type is not None:
            body["type"] = rescue_type
        if ssh_keys is not None:
            body["ssh_keys"] = ssh_keys
        return await self.client.post(f"{self.path}/{server_id}/actions/enable_rescue", body)

    async def disable_rescue(self, server_id: int) -> Action:
        return await self._post_action(server_id, "disable_rescue")

    async def create_image(
        self,
        server_id: int,
        description: Optional[str] = None,
        image_type: Optional[str] = None,
        labels: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Returns {'action': ..., 'image': ...}."""
        body: Dict[str, Any] = {}
        if description is not None:
            body["description"] = description
        if image_type is not None:
            body["type"] = image_type
        if labels is not None:
            body["labels"] = labels
        return await self.client.post(f"{self.path}/{server_id}/actions/create_image", body)

    async def rebuild(self, server_id: int, image: str) -> Dict[str, Any]:
        return await self.client.post(f"{self.path}/{server_id}/actions/rebuild", {"image": image})

    async def attach_iso(self, server_id: int, iso: str) -> Action:
        return await self._post_action(server_id, "attach_iso", {"iso": iso})

    async def detach_iso(self, server_id: int) -> Action:
        return await self._post_action(server_id, "detach_iso")

    # --- Type, protection, backups ---

    async def change_type(self, server_id: int, server_type: str, upgrade_disk: bool) -> Action:
        return await self._post_action(
            server_id, "change_type", {"server_type": server_type, "upgrade_disk": upgrade_disk}
        )

    async def change_protection(
        self,
        server_id: int,
        delete: Optional[bool] = None,
        rebuild: Optional[bool] = None,
    ) -> Action:
        body = {k: v for k, v in (("delete", delete), ("rebuild", rebuild)) if v is not None}
        return await self._post_action(server_id, "change_protection", body)

    async def enable_backup(self, server_id: int) -> Action:
        return await self._post_action(server_id, "enable_backup")

    async def disable_backup(self, server_id: int) -> Action:
        return await self._post_action(server_id, "disable_backup")

    # --- Networking ---

    async def change_dns_ptr(self, server_id: int, ip: str, dns_ptr: Optional[str]) -> Action:
        return await self._post_action(server_id, "change_dns_ptr", {"ip": ip, "dns_ptr": dns_ptr})

    async def attach_to_network(
        self,
        server_id: int,
        network: int,
        ip: Optional[str] = None,
        alias_ips: Optional[List[str]] = None,
    ) -> Action:
        body: Dict[str, Any] = {"network": network}
        if ip is not None:
            body["ip"] = ip
        if alias_ips is not None:
            body["alias_ips"] = alias_ips
        return await self._post_action(server_id, "attach_to_network", body)

    async def detach_from_network(self, server_id: int, network: int) -> Action:
        return await self._post_action(server_id, "detach_from_network", {"network": network})

    async def change_alias_ips(self, server_id: int, network: int, alias_ips: List[str]) -> Action:
        return await self._post_action(
            server_id, "change_alias_ips", {"network": network, "alias_ips": alias_ips}
        )

    # --- Metrics ---

    async def get_metrics(self, server_id: int, metric_type: str, start: str, end: str) -> Dict[str, Any]:
        return await self.client.get(
            f"{self.path}/{server_id}/metrics", {"type": metric_type, "start": start, "end": end}
        )
