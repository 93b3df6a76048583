"""Presentation helpers for repository listings."""

from .adapters import ResourceLookupsAdapter, resource_lookup_sort_key, sort_resource_lookups

__all__ = ["ResourceLookupsAdapter", "resource_lookup_sort_key", "sort_resource_lookups"]
