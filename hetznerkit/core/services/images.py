"""Service for the '/images' endpoint.

Images are created through server actions (create_image), so this service
has no create().
"""

from typing import Any, Dict, Optional

from hetznerkit.core.services.base import ResourceApi
from hetznerkit.domain.models.cloud import Image


class ImagesApi(ResourceApi):
    path = "/images"
    item_key = "image"
    collection_key = "images"

    async def update(self, image_id: int, params: Dict[str, Any]) -> Image:
        response = await self.client.put(self._item_path(image_id), params)
        return response[self.item_key]

    async def delete(self, image_id: int) -> None:
        await self.client.delete(self._item_path(image_id))

    async def get_by_name(self, name: str) -> Optional[Image]:
        return await self._first({"name": name})
