"""
Reusable request objects and a small time-based cache for their results.

A request captures one client call with its arguments so it can be handed to
an async task, retried, or answered from the cache.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union

from .config import DEFAULT_CACHE_TTL_SECONDS
from .logging_config import get_logger
from .models import (
    InputControlsList,
    InputControlStatesList,
    ReportParameter,
    ResourceDescriptor,
    ResourceLookupsList,
    ResourcesList,
    ServerInfo,
)
from .rest_client import JasperRestClient

logger = get_logger(__name__)

T = TypeVar("T")


class BaseRequest(Generic[T]):
    """A deferred call on a JasperRestClient."""

    def __init__(self, client: JasperRestClient, result_type: Type[T]):
        self.client = client
        self.result_type = result_type

    def load_data_from_network(self) -> T:
        raise NotImplementedError


class CacheableRequest(BaseRequest[T]):
    """Request whose result can be cached under a key derived from its arguments."""

    def cache_key_arguments(self) -> Sequence[Any]:
        return ()

    def create_cache_key(self) -> str:
        profile = self.client.server_profile
        server = profile.server_url if profile else ""
        arguments = "".join(str(argument) for argument in self.cache_key_arguments())
        return f"{type(self).__name__}{server}{arguments}"


class GetServerInfoRequest(CacheableRequest[ServerInfo]):
    def __init__(self, client: JasperRestClient):
        super().__init__(client, ServerInfo)

    def load_data_from_network(self) -> ServerInfo:
        return self.client.get_server_info(force_update=True)


class GetResourceRequest(CacheableRequest[ResourceDescriptor]):
    def __init__(self, client: JasperRestClient, uri: str):
        super().__init__(client, ResourceDescriptor)
        self.uri = uri

    def load_data_from_network(self) -> ResourceDescriptor:
        return self.client.get_resource(self.uri)

    def cache_key_arguments(self) -> Sequence[Any]:
        return (self.uri,)


class SearchResourcesRequest(CacheableRequest[ResourcesList]):
    """
    Search a folder of the repository.

    Args:
        uri: Folder URI (e.g. /reports/samples)
        query: Match only resources having this text in name or description
        types: Resource type or list of types to match
        recursive: Search sub folders too
        limit: Maximum number of items, 0 meaning no limit
    """

    def __init__(
        self,
        client: JasperRestClient,
        uri: str,
        query: Optional[str] = None,
        types: Union[str, Sequence[str], None] = None,
        recursive: Optional[bool] = None,
        limit: Optional[int] = None,
    ):
        super().__init__(client, ResourcesList)
        self.uri = uri
        self.query = query
        self.types: Optional[List[str]] = [types] if isinstance(types, str) else (list(types) if types else None)
        self.recursive = recursive
        self.limit = limit

    def load_data_from_network(self) -> ResourcesList:
        return self.client.get_resources(self.uri, self.query, self.types, self.recursive, self.limit)

    def cache_key_arguments(self) -> Sequence[Any]:
        return (self.uri, self.query, self.types, self.recursive, self.limit)


class GetResourceLookupsRequest(CacheableRequest[ResourceLookupsList]):
    def __init__(
        self,
        client: JasperRestClient,
        folder_uri: str,
        query: Optional[str] = None,
        types: Optional[Sequence[str]] = None,
        recursive: bool = True,
        offset: int = 0,
        limit: int = 0,
    ):
        super().__init__(client, ResourceLookupsList)
        self.folder_uri = folder_uri
        self.query = query
        self.types = list(types) if types else None
        self.recursive = recursive
        self.offset = offset
        self.limit = limit

    def load_data_from_network(self) -> ResourceLookupsList:
        return self.client.get_resource_lookups(
            self.folder_uri, self.query, self.types, self.recursive, self.offset, self.limit
        )

    def cache_key_arguments(self) -> Sequence[Any]:
        return (self.folder_uri, self.query, self.types, self.recursive, self.offset, self.limit)


class GetInputControlsRequest(CacheableRequest[InputControlsList]):
    def __init__(
        self,
        client: JasperRestClient,
        report_uri: str,
        control_ids: Optional[Sequence[str]] = None,
        selected_values: Optional[Sequence[ReportParameter]] = None,
    ):
        super().__init__(client, InputControlsList)
        self.report_uri = report_uri
        self.control_ids = list(control_ids or [])
        self.selected_values = list(selected_values or [])

    def load_data_from_network(self) -> InputControlsList:
        return self.client.get_input_controls_list(self.report_uri, self.control_ids, self.selected_values)

    def cache_key_arguments(self) -> Sequence[Any]:
        return (self.report_uri, self.control_ids, self.selected_values)


class GetInputControlsValuesRequest(GetInputControlsRequest):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.result_type = InputControlStatesList

    def load_data_from_network(self) -> InputControlStatesList:
        return self.client.get_input_controls_values_list(self.report_uri, self.control_ids, self.selected_values)


@dataclass
class _CacheEntry:
    data: Any
    expires_at: float


class RequestCache:
    """Thread-safe in-memory cache of request results with a single time-to-live."""

    def __init__(self, ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS):
        self.ttl_seconds = ttl_seconds
        self._entries: Dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= time.monotonic():
                del self._entries[key]
                return None
            return entry.data

    def put(self, key: str, data: Any) -> None:
        with self._lock:
            self._entries[key] = _CacheEntry(data, time.monotonic() + self.ttl_seconds)

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def execute(self, request: BaseRequest[T], use_cache: bool = True) -> T:
        """Return a fresh cached result for ``request`` or load it from the server and cache it."""
        if not isinstance(request, CacheableRequest):
            return request.load_data_from_network()

        key = request.create_cache_key()
        if use_cache:
            cached = self.get(key)
            if cached is not None:
                logger.debug(f"📦 Cache hit for {type(request).__name__}")
                return cached

        data = request.load_data_from_network()
        if self.ttl_seconds > 0:
            self.put(key, data)
        return data
