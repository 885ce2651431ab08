"""Service for DNS records ('/records').

Records are always listed per zone, so the collection methods take the
zone id as their first argument and send it as the 'zone_id' filter.
"""

import logging
from typing import Any, AsyncIterator, Dict, List, Optional

from hetznerkit.core.services.base import MutableResourceApi
from hetznerkit.domain.models.common import Page, QueryParams, ZoneID
from hetznerkit.domain.models.dns import RecordCreateParams, RecordsBulkCreateResponse

logger = logging.getLogger(__name__)


class RecordsApi(MutableResourceApi):
    path = "/records"
    item_key = "record"
    collection_key = "records"

    @staticmethod
    def _zone_filters(zone_id: ZoneID, params: Optional[QueryParams]) -> Dict[str, Any]:
        filters: Dict[str, Any] = dict(params or {})
        filters["zone_id"] = zone_id
        return filters

    async def list(self, zone_id: ZoneID, params: Optional[QueryParams] = None) -> Page:
        return await super().list(self._zone_filters(zone_id, params))

    def iterate(self, zone_id: ZoneID, params: Optional[QueryParams] = None) -> AsyncIterator[Any]:
        return super().iterate(self._zone_filters(zone_id, params))

    async def list_all(self, zone_id: ZoneID, params: Optional[QueryParams] = None) -> List[Any]:
        return await super().list_all(self._zone_filters(zone_id, params))

    async def bulk_create(self, records: List[RecordCreateParams]) -> RecordsBulkCreateResponse:
        response = await self.client.post(f"{self.path}/bulk", {"records": records})
        invalid = response.get("invalid_records") or []
        if invalid:
            logger.warning(f"Bulk create rejected {len(invalid)} of {len(records)} records")
        return response
