"""Entry points of the library.

Wires a transport to every resource service (Composition Root). Tokens,
base URLs and the HTTP timeout default to the values from the configuration
layer when they are not passed explicitly.
"""

from typing import Optional

import httpx

from hetznerkit.core.services import (
    ActionsApi,
    CertificatesApi,
    DatacentersApi,
    FirewallsApi,
    FloatingIPsApi,
    ImagesApi,
    IsosApi,
    LoadBalancersApi,
    LoadBalancerTypesApi,
    LocationsApi,
    NetworksApi,
    PlacementGroupsApi,
    PricingApi,
    PrimaryIPsApi,
    ServersApi,
    ServerTypesApi,
    SshKeysApi,
    VolumesApi,
)
from hetznerkit.core.services.dns import RecordsApi, ZonesApi
from hetznerkit.infrastructure.config.settings import (
    get_cloud_base_url,
    get_cloud_token,
    get_dns_base_url,
    get_dns_token,
    get_http_timeout,
    load_configuration,
)
from hetznerkit.infrastructure.http.cloud_client import HetznerClient
from hetznerkit.infrastructure.http.dns_client import HetznerDnsClient


class Hetzner:
    """Cloud API facade exposing one attribute per resource service.

    Usage:
        async with Hetzner("token") as hetzner:
            async for server in hetzner.servers.iterate({"status": "running"}):
                ...
            created = await hetzner.servers.create({...})
            await hetzner.actions.poll(created["action"]["id"])
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        load_configuration()
        effective_token = token or get_cloud_token()
        if not effective_token:
            raise ValueError("Hetzner Cloud API token not provided and not found in configuration.")

        self.client = HetznerClient(
            effective_token,
            base_url=base_url or get_cloud_base_url(),
            timeout=timeout if timeout is not None else get_http_timeout(),
            http_client=http_client,
        )

        self.actions = ActionsApi(self.client)
        self.certificates = CertificatesApi(self.client)
        self.datacenters = DatacentersApi(self.client)
        self.firewalls = FirewallsApi(self.client)
        self.floating_ips = FloatingIPsApi(self.client)
        self.images = ImagesApi(self.client)
        self.isos = IsosApi(self.client)
        self.load_balancer_types = LoadBalancerTypesApi(self.client)
        self.load_balancers = LoadBalancersApi(self.client)
        self.locations = LocationsApi(self.client)
        self.networks = NetworksApi(self.client)
        self.placement_groups = PlacementGroupsApi(self.client)
        self.pricing = PricingApi(self.client)
        self.primary_ips = PrimaryIPsApi(self.client)
        self.server_types = ServerTypesApi(self.client)
        self.servers = ServersApi(self.client)
        self.ssh_keys = SshKeysApi(self.client)
        self.volumes = VolumesApi(self.client)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Hetzner":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class HetznerDns:
    """DNS API facade. Uses a DNS API token, not a Cloud API token."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        load_configuration()
        effective_token = token or get_dns_token()
        if not effective_token:
            raise ValueError("Hetzner DNS API token not provided and not found in configuration.")

        self.client = HetznerDnsClient(
            effective_token,
            base_url=base_url or get_dns_base_url(),
            timeout=timeout if timeout is not None else get_http_timeout(),
            http_client=http_client,
        )
        self.zones = ZonesApi(self.client)
        self.records = RecordsApi(self.client)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "HetznerDns":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
