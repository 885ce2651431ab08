"""Service for the '/firewalls' endpoint.

Firewall actions fan out to every resource the firewall is applied to, so
they answer with a list of actions instead of a single one.
"""

from typing import Any, Dict, List, Optional

from hetznerkit.core.services.base import MutableResourceApi
from hetznerkit.domain.models.cloud import Action, Firewall, FirewallCreateResponse, FirewallResourceRef


class FirewallsApi(MutableResourceApi):
    path = "/firewalls"
    item_key = "firewall"
    collection_key = "firewalls"

    async def create(self, params: Dict[str, Any]) -> FirewallCreateResponse:
        """Creates a firewall. Returns the full response (firewall, actions)."""
        return await self.client.post(self.path, params)

    async def get_by_name(self, name: str) -> Optional[Firewall]:
        return await self._first({"name": name})

    async def _post_actions(self, firewall_id: int, command: str, body: Dict[str, Any]) -> List[Action]:
        response = await self.client.post(f"{self.path}/{firewall_id}/actions/{command}", body)
        return response["actions"]

    async def set_rules(self, firewall_id: int, rules: List[Dict[str, Any]]) -> List[Action]:
        """Replaces all rules. An empty list removes every rule."""
        return await self._post_actions(firewall_id, "set_rules", {"rules": rules})

    async def apply_to_resources(self, firewall_id: int, resources: List[FirewallResourceRef]) -> List[Action]:
        return await self._post_actions(firewall_id, "apply_to_resources", {"apply_to": resources})

    async def remove_from_resources(self, firewall_id: int, resources: List[FirewallResourceRef]) -> List[Action]:
        return await self._post_actions(firewall_id, "remove_from_resources", {"remove_from": resources})
