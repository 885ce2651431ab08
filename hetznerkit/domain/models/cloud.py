"""Domain models for the Cloud API context.

These mirror the JSON records returned by the Cloud API. They are plain
TypedDicts: the client does not validate or transform responses.
"""

from typing import Any, Dict, List, Literal, Optional, TypedDict

from hetznerkit.domain.models.common import Labels, Protection

# === Actions ===

ActionStatus = Literal["running", "success", "error"]

class ActionResource(TypedDict):
    id: int
    type: str

class ActionErrorInfo(TypedDict):
    code: str
    message: str

class Action(TypedDict):
    """A server-tracked asynchronous operation."""
    id: int
    command: str
    status: ActionStatus
    progress: int
    started: str
    finished: Optional[str]
    resources: List[ActionResource]
    error: Optional[ActionErrorInfo]

# === Locations & Datacenters ===

class Location(TypedDict):
    id: int
    name: str
    description: str
    country: str
    city: str
    latitude: float
    longitude: float
    network_zone: str

class DatacenterServerTypes(TypedDict):
    supported: List[int]
    available: List[int]
    available_for_migration: List[int]

class Datacenter(TypedDict):
    id: int
    name: str
    description: str
    location: Location
    server_types: DatacenterServerTypes

# === Server Types & Images ===

class Price(TypedDict):
    net: str
    gross: str

class ServerTypePrice(TypedDict):
    location: str
    price_hourly: Price
    price_monthly: Price

class ServerType(TypedDict):
    id: int
    name: str
    description: str
    cores: int
    memory: float
    disk: int
    deprecated: bool
    prices: List[ServerTypePrice]
    storage_type: Literal["local", "network"]
    cpu_type: Literal["shared", "dedicated"]
    architecture: Literal["x86", "arm"]
    included_traffic: int

ImageType = Literal["snapshot", "backup", "system", "app"]
ImageStatus = Literal["available", "creating", "unavailable"]

class Image(TypedDict):
    id: int
    type: ImageType
    status: ImageStatus
    name: Optional[str]
    description: str
    image_size: Optional[float]
    disk_size: float
    created: str
    created_from: Optional[Dict[str, Any]]
    bound_to: Optional[int]
    os_flavor: str
    os_version: Optional[str]
    rapid_deploy: bool
    protection: Protection
    deprecated: Optional[str]
    labels: Labels
    deleted: Optional[str]
    architecture: Literal["x86", "arm"]

# === Servers ===

ServerStatus = Literal[
    "running", "initializing", "starting", "stopping",
    "off", "deleting", "rebuilding", "migrating", "unknown",
]

class ServerPrivateNet(TypedDict):
    network: int
    ip: str
    alias_ips: List[str]
    mac_address: str

class Server(TypedDict, total=False):
    id: int
    name: str
    status: ServerStatus
    created: str
    public_net: Dict[str, Any]
    private_net: List[ServerPrivateNet]
    server_type: ServerType
    datacenter: Datacenter
    image: Optional[Image]
    iso: Optional[Dict[str, Any]]
    rescue_enabled: bool
    locked: bool
    backup_window: Optional[str]
    outgoing_traffic: Optional[int]
    ingoing_traffic: Optional[int]
    included_traffic: int
    protection: Protection
    labels: Labels
    volumes: List[int]
    load_balancers: List[int]
    primary_disk_size: int

class ServerCreateResponse(TypedDict, total=False):
    server: Server
    action: Action
    next_actions: List[Action]
    root_password: Optional[str]

# === Volumes ===

class Volume(TypedDict):
    id: int
    name: str
    server: Optional[int]
    location: Location
    size: int
    linux_device: str
    protection: Protection
    labels: Labels
    status: Literal["creating", "available"]
    created: str
    format: Optional[str]

class VolumeCreateResponse(TypedDict, total=False):
    volume: Volume
    action: Action
    next_actions: List[Action]

# === Networks ===

SubnetType = Literal["cloud", "server", "vswitch"]

class Subnet(TypedDict, total=False):
    type: SubnetType
    ip_range: str
    network_zone: str
    gateway: str
    vswitch_id: int

class Route(TypedDict):
    destination: str
    gateway: str

class Network(TypedDict):
    id: int
    name: str
    ip_range: str
    subnets: List[Subnet]
    routes: List[Route]
    servers: List[int]
    load_balancers: List[int]
    protection: Protection
    labels: Labels
    created: str
    expose_routes_to_vswitch: bool

# === Floating IPs & SSH Keys ===

class DnsPtr(TypedDict):
    ip: str
    dns_ptr: str

class FloatingIP(TypedDict):
    id: int
    name: str
    description: str
    ip: str
    type: Literal["ipv4", "ipv6"]
    server: Optional[int]
    dns_ptr: List[DnsPtr]
    home_location: Location
    blocked: bool
    protection: Protection
    labels: Labels
    created: str

class SshKey(TypedDict):
    id: int
    name: str
    fingerprint: str
    public_key: str
    labels: Labels
    created: str

# === Primary IPs & Placement Groups ===

class PrimaryIP(TypedDict):
    id: int
    name: str
    ip: str
    type: Literal["ipv4", "ipv6"]
    datacenter: Datacenter
    blocked: bool
    dns_ptr: List[DnsPtr]
    assignee_id: Optional[int]
    assignee_type: Literal["server"]
    auto_delete: bool
    protection: Protection
    labels: Labels
    created: str

class PrimaryIPCreateResponse(TypedDict, total=False):
    primary_ip: PrimaryIP
    action: Action

class PlacementGroup(TypedDict):
    id: int
    name: str
    type: Literal["spread"]
    servers: List[int]
    labels: Labels
    created: str

# === Firewalls ===

class FirewallResourceRef(TypedDict, total=False):
    type: Literal["server", "label_selector"]
    server: Dict[str, int]
    label_selector: Dict[str, str]

class Firewall(TypedDict):
    id: int
    name: str
    rules: List[Dict[str, Any]]  # rule payloads are passed through as-is
    applied_to: List[FirewallResourceRef]
    labels: Labels
    created: str

class FirewallCreateResponse(TypedDict, total=False):
    firewall: Firewall
    actions: List[Action]

# === Load Balancers ===

class LoadBalancerType(TypedDict):
    id: int
    name: str
    description: str
    max_connections: int
    max_services: int
    max_targets: int
    max_assigned_certificates: int
    deprecated: Optional[str]
    prices: List[ServerTypePrice]

class LoadBalancer(TypedDict):
    id: int
    name: str
    public_net: Dict[str, Any]
    private_net: List[Dict[str, Any]]
    location: Location
    load_balancer_type: LoadBalancerType
    protection: Protection
    labels: Labels
    targets: List[Dict[str, Any]]
    services: List[Dict[str, Any]]
    algorithm: Dict[str, str]
    outgoing_traffic: Optional[int]
    ingoing_traffic: Optional[int]
    included_traffic: int
    created: str

class LoadBalancerCreateResponse(TypedDict, total=False):
    load_balancer: LoadBalancer
    action: Action

# === Certificates, ISOs & Pricing ===

class Certificate(TypedDict):
    id: int
    name: str
    type: Literal["uploaded", "managed"]
    certificate: Optional[str]
    created: str
    not_valid_before: Optional[str]
    not_valid_after: Optional[str]
    domain_names: List[str]
    fingerprint: Optional[str]
    status: Optional[Dict[str, Any]]  # managed certificates only
    used_by: List[ActionResource]
    labels: Labels

class CertificateCreateResponse(TypedDict, total=False):
    certificate: Certificate
    action: Action

class Iso(TypedDict):
    id: int
    name: Optional[str]
    description: str
    type: Literal["public", "private"]
    deprecated: Optional[str]
    architecture: Optional[Literal["x86", "arm"]]

class Pricing(TypedDict, total=False):
    currency: str
    vat_rate: str
    image: Dict[str, Any]
    floating_ip: Dict[str, Any]
    floating_ips: List[Dict[str, Any]]
    primary_ips: List[Dict[str, Any]]
    traffic: Dict[str, Any]
    server_backup: Dict[str, Any]
    server_types: List[Dict[str, Any]]
    load_balancer_types: List[Dict[str, Any]]
    volume: Dict[str, Any]
