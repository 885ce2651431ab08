"""Service for the '/placement_groups' endpoint."""

from typing import Optional

from hetznerkit.core.services.base import MutableResourceApi
from hetznerkit.domain.models.cloud import PlacementGroup


class PlacementGroupsApi(MutableResourceApi):
    path = "/placement_groups"
    item_key = "placement_group"
    collection_key = "placement_groups"

    async def get_by_name(self, name: str) -> Optional[PlacementGroup]:
        return await self._first({"name": name})
