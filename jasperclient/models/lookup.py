"""
Lightweight resource listings returned by the ``/rest_v2/resources`` search.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .resource import json_objects


class ResourceType(str, Enum):
    folder = "folder"
    reportUnit = "reportUnit"
    dashboard = "dashboard"
    legacyDashboard = "legacyDashboard"
    file = "file"
    dataType = "dataType"
    inputControl = "inputControl"
    listOfValues = "listOfValues"
    query = "query"
    jdbcDataSource = "jdbcDataSource"
    jndiJdbcDataSource = "jndiJdbcDataSource"
    unknown = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ResourceType":
        try:
            return cls(value)
        except ValueError:
            return cls.unknown


@dataclass
class ResourceLookup:
    label: str = ""
    uri: str = ""
    description: Optional[str] = None
    resource_type: ResourceType = ResourceType.unknown
    version: int = 0
    permission_mask: int = 0
    creation_date: Optional[str] = None
    update_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourceLookup":
        return cls(
            label=data.get("label") or "",
            uri=data.get("uri") or "",
            description=data.get("description"),
            resource_type=ResourceType.parse(data.get("resourceType")),
            version=data.get("version") or 0,
            permission_mask=data.get("permissionMask") or 0,
            creation_date=data.get("creationDate"),
            update_date=data.get("updateDate"),
        )

    @property
    def is_folder(self) -> bool:
        return self.resource_type is ResourceType.folder


@dataclass
class ResourceLookupsList:
    """A page of lookups plus the paging counters reported in response headers."""

    resource_lookups: List[ResourceLookup] = field(default_factory=list)
    result_count: int = 0
    total_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourceLookupsList":
        return cls([ResourceLookup.from_dict(item) for item in json_objects(data, "resourceLookup")])

    def set_counts(self, result_count: Optional[str], total_count: Optional[str]) -> None:
        self.result_count = _parse_count(result_count)
        self.total_count = _parse_count(total_count)

    def __len__(self) -> int:
        return len(self.resource_lookups)

    def __iter__(self):
        return iter(self.resource_lookups)


def _parse_count(value: Optional[str]) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
