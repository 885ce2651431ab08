"""Service for DNS zones ('/zones')."""

from typing import Optional

from hetznerkit.core.services.base import MutableResourceApi
from hetznerkit.domain.models.dns import Zone


class ZonesApi(MutableResourceApi):
    path = "/zones"
    item_key = "zone"
    collection_key = "zones"

    async def get_by_name(self, name: str) -> Optional[Zone]:
        return await self._first({"name": name})
