"""
JasperReports Server REST client

Covers the legacy XML services under ``/rest`` (resources, report runs, input
control query data) and the JSON services under ``/rest_v2`` (server info,
resource search, reports, input controls, report executions).
"""

import re
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import quote, quote_plus

import httpx

from .config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_MAX_RETRIES, DEFAULT_READ_TIMEOUT
from .exceptions import (
    ConfigurationError,
    ResourceAccessError,
    ResourceNotFoundError,
    ResponseParseError,
    error_for_status,
)
from .logging_config import get_logger
from .models import (
    InputControl,
    InputControlsList,
    InputControlState,
    InputControlStatesList,
    ReportDescriptor,
    ReportExecutionRequest,
    ReportExecutionResponse,
    ReportParameter,
    ReportParametersList,
    ResourceDescriptor,
    ResourceLookupsList,
    ResourceParameter,
    ResourceProperty,
    ResourcesList,
    ServerInfo,
)
from .server_profile import ServerProfile
from .utils.retry_decorator import rest_call_retry

logger = get_logger(__name__)

PathLike = Union[str, Path]

_TEMPLATE_VARIABLE = re.compile(r"\{([^/{}]+)\}")

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPES = "application/xml, text/xml"


def encode_template_value(value: Any) -> str:
    """Render a URI template variable: None is empty, booleans are lowercase, the rest is percent-encoded."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote(str(value), safe="/")


def expand_uri_template(template: str, *values: Any) -> str:
    """
    Expand ``{name}`` variables of ``template`` with ``values`` in order of appearance.

    Raises:
        ValueError: If the template has more variables than values were given
    """
    remaining = iter(values)

    def substitute(match):
        try:
            return encode_template_value(next(remaining))
        except StopIteration:
            raise ValueError(f"Not enough values to expand '{template}': missing '{match.group(1)}'")

    return _TEMPLATE_VARIABLE.sub(substitute, template)


def encode_path(uri: str) -> str:
    """Percent-encode a repository URI for use as a URL path."""
    return quote(uri or "", safe="/")


class JasperRestClient:
    """
    Client for one JasperReports Server instance.

    The server profile can be swapped at runtime; every swap rebuilds the
    underlying HTTP client with the new credentials and drops cached server info.
    """

    REST_SERVICES_URI = "/rest"
    REST_SERVICES_V2_URI = "/rest_v2"
    REST_RESOURCE_URI = "/resource"
    REST_RESOURCES_URI = "/resources"
    REST_REPORT_URI = "/report"
    REST_REPORTS_URI = "/reports"
    REST_INPUT_CONTROLS_URI = "/inputControls"
    REST_VALUES_URI = "/values"
    REST_SERVER_INFO_URI = "/serverInfo"
    REST_REPORT_EXECUTIONS = "/reportExecutions"

    DOWNLOAD_CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        server_profile: Optional[ServerProfile] = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the REST client.

        Args:
            server_profile: Server to talk to (can be set later)
            connect_timeout: Seconds until a connection must be established
            read_timeout: Seconds to wait for data on an open connection
            max_retries: Retries of idempotent requests failing on network errors
            transport: Custom httpx transport (used by tests to fake the server)
        """
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.max_retries = max_retries
        self._transport = transport
        self._http: Optional[httpx.Client] = None
        self._server_profile: Optional[ServerProfile] = None
        self._server_info: Optional[ServerInfo] = None
        self.rest_services_url: Optional[str] = None

        self.stats = {
            "total_requests": 0,
            "successful_requests": 0,
            "failed_requests": 0,
            "bytes_downloaded": 0,
            "total_response_time": 0.0,
        }
        self._stats_lock = threading.Lock()

        if server_profile is not None:
            self.server_profile = server_profile

    # ------------------------------------------------------------------
    # Timeouts
    # ------------------------------------------------------------------

    def set_connect_timeout(self, seconds: float) -> None:
        self.connect_timeout = seconds
        self._update_timeouts()

    def set_read_timeout(self, seconds: float) -> None:
        self.read_timeout = seconds
        self._update_timeouts()

    def _build_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.read_timeout, connect=self.connect_timeout)

    def _update_timeouts(self) -> None:
        if self._http is not None:
            self._http.timeout = self._build_timeout()

    # ------------------------------------------------------------------
    # Server profile & info
    # ------------------------------------------------------------------

    @property
    def server_profile(self) -> Optional[ServerProfile]:
        return self._server_profile

    @server_profile.setter
    def server_profile(self, profile: ServerProfile) -> None:
        self._server_info = None
        self._server_profile = profile
        self.rest_services_url = profile.server_url + self.REST_SERVICES_URI

        if self._http is not None:
            self._http.close()
        self._http = httpx.Client(
            headers={
                "Authorization": profile.basic_auth_header(),
                # keep-alive is disabled on purpose, the server closes idle connections aggressively
                "Connection": "close",
            },
            timeout=self._build_timeout(),
            follow_redirects=True,
            transport=self._transport,
        )
        logger.info(f"🔌 Server profile set: {profile.describe()}")

    @property
    def rest_v2_url(self) -> str:
        return self._require_profile().server_url + self.REST_SERVICES_V2_URI

    def get_server_info(self, force_update: bool = False) -> ServerInfo:
        """
        Get server edition and version, cached until ``force_update`` or a profile change.

        Servers that predate the info service answer 404; they get an empty ServerInfo.
        """
        if force_update or self._server_info is None:
            url = self.rest_v2_url + self.REST_SERVER_INFO_URI
            try:
                data = self._get_json(url)
                self._server_info = ServerInfo.from_dict(data or {})
            except ResourceNotFoundError:
                logger.info("ℹ️  Server has no serverInfo service, assuming an old version")
                self._server_info = ServerInfo()
        return self._server_info

    # ------------------------------------------------------------------
    # Resource service
    # ------------------------------------------------------------------

    def get_resource(self, uri: str) -> ResourceDescriptor:
        url = self._require_rest_url() + self.REST_RESOURCE_URI + encode_path(uri)
        return ResourceDescriptor.from_xml(self._get_xml(url))

    def modify_resource(self, resource_descriptor: ResourceDescriptor) -> Optional[str]:
        """Save the descriptor on the server; returns the ``Location`` header if any."""
        url = self._require_rest_url() + self.REST_RESOURCE_URI + encode_path(resource_descriptor.uri_string)
        response = self._request(
            "POST",
            url,
            content=resource_descriptor.to_xml_string().encode("utf-8"),
            headers={"Content-Type": "application/xml"},
        )
        return response.headers.get("Location")

    def delete_resource(self, uri: str) -> None:
        url = self._require_rest_url() + self.REST_RESOURCE_URI + encode_path(uri)
        self._request("DELETE", url)

    def get_resources(
        self,
        uri: str,
        query: Optional[str] = None,
        types: Union[str, Sequence[str], None] = None,
        recursive: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> ResourcesList:
        """
        List resources of a folder, optionally filtered.

        Args:
            uri: Folder URI (e.g. /reports/samples)
            query: Match only resources having this text in name or description
            types: Match only resources of the given type(s)
            recursive: Search sub folders too; only used together with query or types
            limit: Maximum number of items returned, 0 meaning no limit
        """
        if isinstance(types, str):
            types = [types]

        url = self._require_rest_url() + self.REST_RESOURCES_URI + encode_path(uri)
        if query is not None or types or recursive is not None or limit is not None:
            url = expand_uri_template(url + "?q={query}&recursive={recursive}&limit={limit}", query, recursive, limit)
            for resource_type in types or []:
                url += "&type=" + encode_template_value(resource_type)

        return ResourcesList.from_xml(self._get_xml(url))

    def get_resources_list(self, uri: str, **criteria) -> List[ResourceDescriptor]:
        return self.get_resources(uri, **criteria).resource_descriptors

    def get_resource_lookups(
        self,
        folder_uri: str,
        query: Optional[str] = None,
        types: Optional[Sequence[str]] = None,
        recursive: bool = True,
        offset: int = 0,
        limit: int = 0,
    ) -> ResourceLookupsList:
        """
        Search the repository through the v2 resources service.

        Returns:
            A page of lookups; ``result_count``/``total_count`` come from the
            Result-Count and Total-Count headers. An empty list on HTTP 204.
        """
        url = expand_uri_template(
            self.rest_v2_url
            + self.REST_RESOURCES_URI
            + "?folderUri={folderUri}&q={query}&recursive={recursive}&offset={offset}&limit={limit}",
            folder_uri,
            query,
            recursive,
            offset,
            limit,
        )
        for resource_type in types or []:
            url += "&type=" + encode_template_value(resource_type)

        response = self._get(url, accept=JSON_MEDIA_TYPE)
        if response.status_code == 204:
            return ResourceLookupsList()

        lookups = ResourceLookupsList.from_dict(self._parse_json(response) or {})
        lookups.set_counts(response.headers.get("Result-Count"), response.headers.get("Total-Count"))
        return lookups

    # ------------------------------------------------------------------
    # Report service
    # ------------------------------------------------------------------

    def get_report_descriptor(self, resource_descriptor: ResourceDescriptor, output_format: str) -> ReportDescriptor:
        """Run a report through the legacy service; outputs are kept on the server under the returned uuid."""
        url = expand_uri_template(
            self._require_rest_url()
            + self.REST_REPORT_URI
            + encode_path(resource_descriptor.uri_string)
            + "?IMAGES_URI=./&RUN_OUTPUT_FORMAT={format}",
            output_format,
        )
        response = self._request(
            "PUT",
            url,
            content=resource_descriptor.to_xml_string().encode("utf-8"),
            headers={"Accept": "text/xml", "Content-Type": "application/xml"},
        )
        return ReportDescriptor.from_xml(self._require_body(response))

    def _report_attachment_url(self, uuid: str, name: str) -> str:
        return expand_uri_template(self._require_rest_url() + self.REST_REPORT_URI + "/{uuid}?file={name}", uuid, name)

    def get_report_attachment(self, uuid: str, name: str) -> bytes:
        response = self._get(self._report_attachment_url(uuid, name), accept="application/octet-stream")
        return response.content

    def save_report_attachment_to_file(self, uuid: str, name: str, file_path: PathLike) -> int:
        return self._download_file(self._report_attachment_url(uuid, name), file_path)

    def generate_report_url(
        self,
        report_uri: str,
        parameters: Optional[Sequence[ReportParameter]] = None,
        page: int = 0,
        output_format: str = "HTML",
    ) -> str:
        """
        Build the URL of a report output, e.g. ``{server}/rest_v2/reports/samples/Foo.HTML?a=1&page=2``.

        Every value of a multi-value parameter becomes its own ``name=value`` pair.
        """
        report_url = f"{self.rest_v2_url}{self.REST_REPORTS_URI}{encode_path(report_uri)}.{output_format}"

        pairs = []
        for parameter in parameters or []:
            for value in parameter.values:
                pairs.append(f"{quote_plus(parameter.name)}={quote_plus(str(value))}")
        if page > 0:
            pairs.append(f"page={page}")

        if pairs:
            report_url += "?" + "&".join(pairs)
        return report_url

    def save_report_output_to_file(self, report_url: str, file_path: PathLike) -> int:
        try:
            url = httpx.URL(report_url)
        except httpx.InvalidURL as e:
            raise ValueError(f"Could not create URI object: {e}") from e
        if url.scheme not in ("http", "https"):
            raise ValueError(f"Could not create URI object: unsupported URL '{report_url}'")
        return self._download_file(str(url), file_path)

    # ------------------------------------------------------------------
    # Report execution service
    # ------------------------------------------------------------------

    @property
    def report_executions_url(self) -> str:
        return self.rest_v2_url + self.REST_REPORT_EXECUTIONS

    def run_report_execution(self, request: ReportExecutionRequest) -> ReportExecutionResponse:
        response = self._request(
            "POST",
            self.report_executions_url,
            json=request.to_dict(),
            headers={"Accept": JSON_MEDIA_TYPE},
        )
        return ReportExecutionResponse.from_dict(self._parse_json(response) or {})

    def get_report_execution_details(self, request_id: str) -> ReportExecutionResponse:
        url = expand_uri_template(self.report_executions_url + "/{requestId}", request_id)
        return ReportExecutionResponse.from_dict(self._get_json(url) or {})

    def get_report_execution_status(self, request_id: str) -> Optional[str]:
        url = expand_uri_template(self.report_executions_url + "/{requestId}/status", request_id)
        data = self._get_json(url) or {}
        return data.get("value")

    def get_export_output_resource_uri(self, execution_id: str, export_output: str) -> str:
        return expand_uri_template(
            self.report_executions_url + "/{executionId}/exports/{exportOutput}/outputResource",
            execution_id,
            export_output,
        )

    def save_export_output_to_file(self, execution_id: str, export_output: str, file_path: PathLike) -> int:
        return self._download_file(self.get_export_output_resource_uri(execution_id, export_output), file_path)

    def get_export_attachment_uri(self, execution_id: str, export_output: str, attachment_name: str) -> str:
        return expand_uri_template(
            self.report_executions_url + "/{executionId}/exports/{exportOutput}/attachments/{attachment}",
            execution_id,
            export_output,
            attachment_name,
        )

    def save_export_attachment_to_file(
        self, execution_id: str, export_output: str, attachment_name: str, file_path: PathLike
    ) -> int:
        url = self.get_export_attachment_uri(execution_id, export_output, attachment_name)
        return self._download_file(url, file_path)

    # ------------------------------------------------------------------
    # Input controls (legacy service)
    # ------------------------------------------------------------------

    def get_input_control_with_query_data(
        self, uri: str, datasource_uri: str, params: Optional[Sequence[ResourceParameter]] = None
    ) -> ResourceDescriptor:
        """Fetch a query-based input control with its query result rows attached."""
        url = (
            self._require_rest_url()
            + self.REST_RESOURCE_URI
            + encode_path(uri)
            + "?IC_GET_QUERY_DATA="
            + encode_template_value(datasource_uri)
        )
        for parameter in params or []:
            prefix = "&PL_" if parameter.is_list_item else "&P_"
            url += f"{prefix}{encode_template_value(parameter.name)}={encode_template_value(parameter.value)}"
        return ResourceDescriptor.from_xml(self._get_xml(url))

    def get_input_control_query_data(
        self, uri: str, datasource_uri: str, params: Optional[Sequence[ResourceParameter]] = None
    ) -> List[ResourceProperty]:
        """
        Flatten the query data of an input control into (key, label) properties.

        Each row becomes ``ResourceProperty(name=row value, value="col1 | col2")``.
        """
        descriptor = self.get_input_control_with_query_data(uri, datasource_uri, params)
        query_data = descriptor.get_property_by_name(ResourceDescriptor.PROP_QUERY_DATA)

        list_of_values = []
        if query_data is None:
            return list_of_values

        for row in query_data.properties:
            columns = [
                column.value or ""
                for column in row.properties
                if column.name == ResourceDescriptor.PROP_QUERY_DATA_ROW_COLUMN
            ]
            list_of_values.append(ResourceProperty(name=row.value, value=" | ".join(columns)))
        return list_of_values

    # ------------------------------------------------------------------
    # Input controls
    # ------------------------------------------------------------------

    def get_input_controls(
        self,
        report_uri: str,
        control_ids: Optional[Sequence[str]] = None,
        selected_values: Optional[Sequence[ReportParameter]] = None,
    ) -> List[InputControl]:
        return self.get_input_controls_list(report_uri, control_ids, selected_values).input_controls

    def get_input_controls_list(
        self,
        report_uri: str,
        control_ids: Optional[Sequence[str]] = None,
        selected_values: Optional[Sequence[ReportParameter]] = None,
    ) -> InputControlsList:
        """Get the input controls of a report, their states computed from ``selected_values``."""
        url = self._generate_input_controls_url(report_uri, control_ids or [], values_only=False)
        response = self._post_parameters(url, selected_values)
        return InputControlsList.from_dict(self._parse_json(response, allow_empty=True))

    def get_input_controls_values(
        self,
        report_uri: str,
        control_ids: Optional[Sequence[str]] = None,
        selected_values: Optional[Sequence[ReportParameter]] = None,
    ) -> List[InputControlState]:
        return self.get_input_controls_values_list(report_uri, control_ids, selected_values).input_control_states

    def get_input_controls_values_list(
        self,
        report_uri: str,
        control_ids: Optional[Sequence[str]] = None,
        selected_values: Optional[Sequence[ReportParameter]] = None,
    ) -> InputControlStatesList:
        """Get only the states of the input controls. An unreadable body yields an empty list."""
        url = self._generate_input_controls_url(report_uri, control_ids or [], values_only=True)
        response = self._post_parameters(url, selected_values)
        try:
            return InputControlStatesList.from_dict(self._parse_json(response, allow_empty=True))
        except ResponseParseError as e:
            logger.warning(f"⚠️ Unreadable input control states for {report_uri}: {e}")
            return InputControlStatesList()

    def validate_input_controls(self, report_uri: str, input_controls: Sequence[InputControl]) -> List[InputControlState]:
        """Validate the selected values of ``input_controls``; returns only the states with errors."""
        control_ids = [control.id for control in input_controls]
        selected_values = [ReportParameter(control.id, control.selected_values) for control in input_controls]
        return self.validate_input_controls_values(report_uri, control_ids, selected_values)

    def validate_input_controls_values(
        self, report_uri: str, control_ids: Sequence[str], selected_values: Sequence[ReportParameter]
    ) -> List[InputControlState]:
        return self.validate_input_controls_values_list(report_uri, control_ids, selected_values).input_control_states

    def validate_input_controls_values_list(
        self, report_uri: str, control_ids: Sequence[str], selected_values: Sequence[ReportParameter]
    ) -> InputControlStatesList:
        states = self.get_input_controls_values_list(report_uri, control_ids, selected_values)
        states.input_control_states = [state for state in states.input_control_states if state.error is not None]
        return states

    def _generate_input_controls_url(self, report_uri: str, control_ids: Sequence[str], values_only: bool) -> str:
        url = self.rest_v2_url + self.REST_REPORTS_URI + encode_path(report_uri) + self.REST_INPUT_CONTROLS_URI
        if control_ids:
            url += "/" + "".join(f"{encode_template_value(control_id)};" for control_id in control_ids)
        if values_only:
            url += self.REST_VALUES_URI
        return url

    def _post_parameters(self, url: str, selected_values: Optional[Sequence[ReportParameter]]) -> httpx.Response:
        body = ReportParametersList(list(selected_values or [])).to_dict()
        return self._request("POST", url, json=body, headers={"Accept": JSON_MEDIA_TYPE})

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_statistics(self) -> Dict[str, Any]:
        """Get client usage statistics"""
        with self._stats_lock:
            stats = self.stats.copy()
        if stats["total_requests"] > 0:
            stats["success_rate"] = (stats["successful_requests"] / stats["total_requests"]) * 100
        else:
            stats["success_rate"] = 0.0
        if stats["successful_requests"] > 0:
            stats["average_response_time"] = stats["total_response_time"] / stats["successful_requests"]
        else:
            stats["average_response_time"] = 0.0
        return stats

    def reset_statistics(self) -> None:
        with self._stats_lock:
            for key in self.stats:
                self.stats[key] = 0

    def _count(self, **increments: float) -> None:
        # tasks on several worker threads share one client
        with self._stats_lock:
            for key, amount in increments.items():
                self.stats[key] += amount

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _require_profile(self) -> ServerProfile:
        if self._server_profile is None:
            raise ConfigurationError("No server profile set on the REST client")
        return self._server_profile

    def _require_rest_url(self) -> str:
        self._require_profile()
        return self.rest_services_url

    def _require_http(self) -> httpx.Client:
        self._require_profile()
        if self._http is None:
            raise ConfigurationError("REST client is closed")
        return self._http

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send one request; transport failures become ResourceAccessError, error statuses HttpStatusError."""
        http = self._require_http()
        self._count(total_requests=1)
        start_time = time.time()
        logger.debug(f"➡️  {method} {url}")

        try:
            response = http.request(method, url, **kwargs)
        except httpx.TransportError as e:
            self._count(failed_requests=1)
            raise ResourceAccessError(f"I/O error on {method} {url}: {e}", url=url) from e

        if response.is_error:
            self._count(failed_requests=1)
            logger.debug(f"⬅️  {response.status_code} {method} {url}")
            raise error_for_status(response.status_code, url, response.text)

        self._count(successful_requests=1, total_response_time=time.time() - start_time)
        logger.debug(f"⬅️  {response.status_code} {method} {url}")
        return response

    def _get(self, url: str, accept: str) -> httpx.Response:
        send = rest_call_retry(self.max_retries)(self._request)
        return send("GET", url, headers={"Accept": accept})

    def _get_xml(self, url: str) -> bytes:
        return self._require_body(self._get(url, accept=XML_MEDIA_TYPES))

    def _get_json(self, url: str) -> Any:
        return self._parse_json(self._get(url, accept=JSON_MEDIA_TYPE))

    @staticmethod
    def _require_body(response: httpx.Response) -> bytes:
        if not response.content.strip():
            raise ResponseParseError(
                f"Empty response body from {response.request.url}",
                content_type=response.headers.get("Content-Type"),
            )
        return response.content

    @staticmethod
    def _parse_json(response: httpx.Response, allow_empty: bool = False) -> Optional[Dict[str, Any]]:
        if not response.content.strip():
            if allow_empty:
                return None
            raise ResponseParseError(
                f"Empty response body from {response.request.url}",
                content_type=response.headers.get("Content-Type"),
            )
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Could not read JSON from {response.request.url}: {e}",
                content_type=response.headers.get("Content-Type"),
            ) from e
        if not isinstance(data, dict):
            raise ResponseParseError(
                f"Expected a JSON object from {response.request.url}, got {type(data).__name__}",
                content_type=response.headers.get("Content-Type"),
            )
        return data

    def _download_file(self, url: str, file_path: PathLike) -> int:
        download = rest_call_retry(self.max_retries)(self._download_once)
        return download(url, Path(file_path))

    def _download_once(self, url: str, file_path: Path) -> int:
        """Stream a GET response into ``file_path``; returns the number of bytes written."""
        http = self._require_http()
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ResourceAccessError(f"Unable to create folder: {file_path.parent}", url=url) from e

        self._count(total_requests=1)
        start_time = time.time()
        logger.debug(f"⬇️  GET {url} -> {file_path}")

        written = 0
        try:
            with http.stream("GET", url) as response:
                if response.is_error:
                    response.read()
                    self._count(failed_requests=1)
                    raise error_for_status(response.status_code, url, response.text)
                with open(file_path, "wb") as output:
                    for chunk in response.iter_bytes(self.DOWNLOAD_CHUNK_SIZE):
                        output.write(chunk)
                        written += len(chunk)
        except httpx.TransportError as e:
            self._count(failed_requests=1)
            self._remove_partial_file(file_path)
            raise ResourceAccessError(f"I/O error: {e}", url=url) from e
        except OSError as e:
            self._count(failed_requests=1)
            self._remove_partial_file(file_path)
            raise ResourceAccessError(f"I/O error writing {file_path}: {e}", url=url) from e

        self._count(successful_requests=1, bytes_downloaded=written, total_response_time=time.time() - start_time)
        logger.info(f"💾 Saved {written} bytes to {file_path}")
        return written

    @staticmethod
    def _remove_partial_file(file_path: Path) -> None:
        try:
            file_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"⚠️ Could not remove partial download {file_path}: {e}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "JasperRestClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
