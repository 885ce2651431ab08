"""Service for the '/certificates' endpoint.

Uploaded certificates are usable immediately. Managed certificates are
issued through Let's Encrypt by an action that retry() can restart.
"""

from typing import Any, Dict, Optional

from hetznerkit.core.services.base import ActionResourceMixin, MutableResourceApi
from hetznerkit.domain.models.cloud import Action, Certificate, CertificateCreateResponse


class CertificatesApi(ActionResourceMixin, MutableResourceApi):
    path = "/certificates"
    item_key = "certificate"
    collection_key = "certificates"

    async def create(self, params: Dict[str, Any]) -> CertificateCreateResponse:
        """Returns the full response; managed certificates also carry the issuance action."""
        return await self.client.post(self.path, params)

    async def get_by_name(self, name: str) -> Optional[Certificate]:
        return await self._first({"name": name})

    async def retry(self, certificate_id: int) -> Action:
        """Retries a failed issuance or renewal of a managed certificate."""
        return await self._post_action(certificate_id, "retry")
