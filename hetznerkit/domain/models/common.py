"""Defines common Value Objects used across the Cloud and DNS contexts.

Covers identifiers, query parameters and the pagination envelope that
every collection endpoint returns.
"""

from typing import Any, Dict, List, Mapping, NewType, Optional, TypedDict, Union

# === Identifiers ===

# Cloud resources use integer ids, DNS resources use opaque string ids.
ResourceID = NewType("ResourceID", int)
ActionID = NewType("ActionID", int)
ZoneID = NewType("ZoneID", str)
RecordID = NewType("RecordID", str)

# === Request Context ===

QueryScalar = Union[str, int, float, bool]
QueryValue = Union[QueryScalar, List[QueryScalar], None]
QueryParams = Mapping[str, QueryValue]

Labels = Dict[str, str]

# === Pagination Context ===

class Pagination(TypedDict):
    """Pagination metadata attached to every page of a collection."""
    page: int
    per_page: int
    previous_page: Optional[int]
    next_page: Optional[int]  # None on the last page
    last_page: int
    total_entries: int

class PaginationMeta(TypedDict):
    pagination: Pagination

# Raw decoded JSON page, e.g. {"servers": [...], "meta": {...}}
Page = Dict[str, Any]

class Protection(TypedDict, total=False):
    delete: bool
    rebuild: bool
