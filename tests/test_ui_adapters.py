#!/usr/bin/env python3
"""
Tests for the repository list adapter.
"""

from jasperclient.models import ResourceLookup, ResourceType
from jasperclient.ui import ResourceLookupsAdapter, sort_resource_lookups


def lookup(label, resource_type, uri=None):
    return ResourceLookup(label=label, uri=uri or f"/{label}", resource_type=resource_type)


def test_folders_first_then_label_ignoring_case():
    lookups = [
        lookup("zebra report", ResourceType.reportUnit),
        lookup("Samples", ResourceType.folder),
        lookup("Alpha", ResourceType.reportUnit),
        lookup("images", ResourceType.folder),
        lookup("beta", ResourceType.file),
    ]

    labels = [item.label for item in sort_resource_lookups(lookups)]

    assert labels == ["images", "Samples", "Alpha", "beta", "zebra report"]


def test_adapter_sorts_on_add():
    adapter = ResourceLookupsAdapter([lookup("b", ResourceType.reportUnit)])
    adapter.add_all([lookup("a", ResourceType.reportUnit), lookup("z", ResourceType.folder)])

    assert len(adapter) == 3
    assert [item.label for item in adapter] == ["z", "a", "b"]
    assert adapter.get_item(0).is_folder


def test_adapter_keeps_order_when_sorting_disabled():
    adapter = ResourceLookupsAdapter(sort_on_add=False)
    adapter.add_all([lookup("b", ResourceType.reportUnit), lookup("a", ResourceType.folder)])

    assert [item.label for item in adapter] == ["b", "a"]

    adapter.sort()
    assert [item.label for item in adapter] == ["a", "b"]

    adapter.clear()
    assert len(adapter) == 0


def test_display_rows():
    adapter = ResourceLookupsAdapter(
        [
            lookup("Samples", ResourceType.folder, "/reports/samples"),
            lookup("Accounts", ResourceType.reportUnit, "/reports/accounts"),
            lookup("Sales cube", ResourceType.unknown, "/analysis/sales"),
        ]
    )

    assert adapter.display_rows() == [
        ("[DIR]", "Samples", "/reports/samples"),
        ("[RPT]", "Accounts", "/reports/accounts"),
        ("[---]", "Sales cube", "/analysis/sales"),
    ]
