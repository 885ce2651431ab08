"""Domain models for the DNS API context."""

from typing import List, Literal, Optional, TypedDict

ZoneStatus = Literal["verified", "failed", "pending"]

RecordType = Literal[
    "A", "AAAA", "CNAME", "MX", "NS", "TXT",
    "SRV", "CAA", "TLSA", "DS", "SOA", "PTR",
]

class Zone(TypedDict):
    id: str
    name: str
    ttl: int
    ns: List[str]
    records_count: int
    created: str
    modified: str
    status: ZoneStatus

class Record(TypedDict, total=False):
    id: str
    zone_id: str
    type: RecordType
    name: str
    value: str
    ttl: Optional[int]
    created: str
    modified: str

class RecordCreateParams(TypedDict, total=False):
    zone_id: str
    type: RecordType
    name: str
    value: str
    ttl: int

class RecordsBulkCreateResponse(TypedDict):
    records: List[Record]
    valid_records: List[Record]
    invalid_records: List[Record]
