"""Service for the '/load_balancers' endpoint and its actions."""

from typing import Any, Dict, Optional, Union

from hetznerkit.core.services.base import ActionResourceMixin, MutableResourceApi
from hetznerkit.domain.models.cloud import Action, LoadBalancer, LoadBalancerCreateResponse


class LoadBalancersApi(ActionResourceMixin, MutableResourceApi):
    """Load balancers, their services (listeners) and targets."""

    path = "/load_balancers"
    item_key = "load_balancer"
    collection_key = "load_balancers"

    async def create(self, params: Dict[str, Any]) -> LoadBalancerCreateResponse:
        """Creates a load balancer. Returns the full response (load_balancer, action)."""
        return await self.client.post(self.path, params)

    async def get_by_name(self, name: str) -> Optional[LoadBalancer]:
        return await self._first({"name": name})

    # --- Services ---

    async def add_service(self, load_balancer_id: int, service: Dict[str, Any]) -> Action:
        return await self._post_action(load_balancer_id, "add_service", service)

    async def update_service(self, load_balancer_id: int, service: Dict[str, Any]) -> Action:
        return await self._post_action(load_balancer_id, "update_service", service)

    async def delete_service(self, load_balancer_id: int, listen_port: int) -> Action:
        return await self._post_action(load_balancer_id, "delete_service", {"listen_port": listen_port})

    # --- Targets ---

    async def add_target(self, load_balancer_id: int, target: Dict[str, Any]) -> Action:
        return await self._post_action(load_balancer_id, "add_target", target)

    async def remove_target(self, load_balancer_id: int, target: Dict[str, Any]) -> Action:
        return await self._post_action(load_balancer_id, "remove_target", target)

    # --- Networking ---

    async def attach_to_network(self, load_balancer_id: int, network: int, ip: Optional[str] = None) -> Action:
        body: Dict[str, Any] = {"network": network}
        if ip is not None:
            body["ip"] = ip
        return await self._post_action(load_balancer_id, "attach_to_network", body)

    async def detach_from_network(self, load_balancer_id: int, network: int) -> Action:
        return await self._post_action(load_balancer_id, "detach_from_network", {"network": network})

    async def enable_public_interface(self, load_balancer_id: int) -> Action:
        return await self._post_action(load_balancer_id, "enable_public_interface")

    async def disable_public_interface(self, load_balancer_id: int) -> Action:
        return await self._post_action(load_balancer_id, "disable_public_interface")

    async def change_dns_ptr(self, load_balancer_id: int, ip: str, dns_ptr: Optional[str]) -> Action:
        return await self._post_action(load_balancer_id, "change_dns_ptr", {"ip": ip, "dns_ptr": dns_ptr})

    # --- Configuration ---

    async def change_algorithm(self, load_balancer_id: int, algorithm: str) -> Action:
        """algorithm is 'round_robin' or 'least_connections'."""
        return await self._post_action(load_balancer_id, "change_algorithm", {"type": algorithm})

    async def change_type(self, load_balancer_id: int, load_balancer_type: Union[str, int]) -> Action:
        return await self._post_action(
            load_balancer_id, "change_type", {"load_balancer_type": load_balancer_type}
        )

    async def change_protection(self, load_balancer_id: int, delete: bool) -> Action:
        return await self._post_action(load_balancer_id, "change_protection", {"delete": delete})

    async def get_metrics(
        self,
        load_balancer_id: int,
        metric_type: str,
        start: str,
        end: str,
        step: Optional[int] = None,
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"{self.path}/{load_balancer_id}/metrics",
            {"type": metric_type, "start": start, "end": end, "step": step},
        )
