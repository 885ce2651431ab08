"""Service for the '/pricing' endpoint (a single record, not a collection)."""

from hetznerkit.domain.interfaces.transport import Transport
from hetznerkit.domain.models.cloud import Pricing


class PricingApi:
    path = "/pricing"

    def __init__(self, client: Transport):
        self.client = client

    async def get(self) -> Pricing:
        response = await self.client.get(self.path)
        return response["pricing"]
