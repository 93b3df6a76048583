"""
List adapters for presenting repository listings.
"""

from typing import Iterable, List, Optional, Tuple

from ..models import ResourceLookup, ResourceType

TYPE_TAGS = {
    ResourceType.folder: "[DIR]",
    ResourceType.reportUnit: "[RPT]",
    ResourceType.dashboard: "[DSH]",
    ResourceType.legacyDashboard: "[DSH]",
    ResourceType.file: "[FIL]",
}


def resource_lookup_sort_key(lookup: ResourceLookup) -> Tuple[bool, str]:
    """Folders first, then by label ignoring case."""
    return (lookup.resource_type is not ResourceType.folder, lookup.label.lower())


def sort_resource_lookups(lookups: Iterable[ResourceLookup]) -> List[ResourceLookup]:
    return sorted(lookups, key=resource_lookup_sort_key)


class ResourceLookupsAdapter:
    """Holds the lookups shown in a repository list and renders them as rows."""

    def __init__(self, lookups: Optional[Iterable[ResourceLookup]] = None, sort_on_add: bool = True):
        self.sort_on_add = sort_on_add
        self._items: List[ResourceLookup] = []
        if lookups:
            self.add_all(lookups)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def get_item(self, position: int) -> ResourceLookup:
        return self._items[position]

    def add_all(self, lookups: Iterable[ResourceLookup]) -> None:
        self._items.extend(lookups)
        if self.sort_on_add:
            self.sort()

    def clear(self) -> None:
        self._items.clear()

    def sort(self) -> None:
        self._items.sort(key=resource_lookup_sort_key)

    def display_rows(self) -> List[Tuple[str, str, str]]:
        """(type tag, label, uri) per item, in list order."""
        return [(TYPE_TAGS.get(item.resource_type, "[---]"), item.label, item.uri) for item in self._items]
