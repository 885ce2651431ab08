"""Service for the '/ssh_keys' endpoint."""

from typing import Optional

from hetznerkit.core.services.base import MutableResourceApi
from hetznerkit.domain.models.cloud import SshKey


class SshKeysApi(MutableResourceApi):
    path = "/ssh_keys"
    item_key = "ssh_key"
    collection_key = "ssh_keys"

    async def get_by_name(self, name: str) -> Optional[SshKey]:
        return await self._first({"name": name})

    async def get_by_fingerprint(self, fingerprint: str) -> Optional[SshKey]:
        return await self._first({"fingerprint": fingerprint})
