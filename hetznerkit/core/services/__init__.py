"""Resource services: one class per API collection."""

from hetznerkit.core.services.actions import ActionsApi
from hetznerkit.core.services.certificates import CertificatesApi
from hetznerkit.core.services.firewalls import FirewallsApi
from hetznerkit.core.services.floating_ips import FloatingIPsApi
from hetznerkit.core.services.images import ImagesApi
from hetznerkit.core.services.load_balancers import LoadBalancersApi
from hetznerkit.core.services.locations import (
    DatacentersApi,
    IsosApi,
    LoadBalancerTypesApi,
    LocationsApi,
    ServerTypesApi,
)
from hetznerkit.core.services.networks import NetworksApi
from hetznerkit.core.services.placement_groups import PlacementGroupsApi
from hetznerkit.core.services.pricing import PricingApi
from hetznerkit.core.services.primary_ips import PrimaryIPsApi
from hetznerkit.core.services.servers import ServersApi
from hetznerkit.core.services.ssh_keys import SshKeysApi
from hetznerkit.core.services.volumes import VolumesApi

__all__ = [
    "ActionsApi",
    "CertificatesApi",
    "DatacentersApi",
    "FirewallsApi",
    "FloatingIPsApi",
    "ImagesApi",
    "IsosApi",
    "LoadBalancerTypesApi",
    "LoadBalancersApi",
    "LocationsApi",
    "NetworksApi",
    "PlacementGroupsApi",
    "PricingApi",
    "PrimaryIPsApi",
    "ServerTypesApi",
    "ServersApi",
    "SshKeysApi",
    "VolumesApi",
]
