"""Service for the '/volumes' endpoint and its volume actions."""

from typing import Any, Dict, Optional

from hetznerkit.core.services.base import ActionResourceMixin, MutableResourceApi
from hetznerkit.domain.models.cloud import Action, Volume, VolumeCreateResponse


class VolumesApi(ActionResourceMixin, MutableResourceApi):
    """Block storage volumes."""

    path = "/volumes"
    item_key = "volume"
    collection_key = "volumes"

    async def create(self, params: Dict[str, Any]) -> VolumeCreateResponse:
        """Creates a volume. Returns the full response (volume, action, next_actions)."""
        return await self.client.post(self.path, params)

    async def get_by_name(self, name: str) -> Optional[Volume]:
        return await self._first({"name": name})

    async def attach(self, volume_id: int, server: int, automount: Optional[bool] = None) -> Action:
        body: Dict[str, Any] = {"server": server}
        # automount is only sent when the caller chose a value
        if automount is not None:
            body["automount"] = automount
        return await self._post_action(volume_id, "attach", body)

    async def detach(self, volume_id: int) -> Action:
        return await self._post_action(volume_id, "detach")

    async def resize(self, volume_id: int, size: int) -> Action:
        return await self._post_action(volume_id, "resize", {"size": size})

    async def change_protection(self, volume_id: int, delete: bool) -> Action:
        return await self._post_action(volume_id, "change_protection", {"delete": delete})
