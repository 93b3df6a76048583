"""
Ready-made async tasks for the common client calls.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..exceptions import ResponseParseError
from ..models import (
    InputControl,
    InputControlState,
    ReportAttachment,
    ReportExecutionRequest,
    ReportExecutionResponse,
    ReportParameter,
    ResourceLookupsList,
    ServerInfo,
)
from ..rest_client import JasperRestClient
from ..rest_requests import BaseRequest, RequestCache
from .base import AsyncTask, RestAsyncTask


class GetServerInfoAsyncTask(RestAsyncTask):
    def __init__(self, task_id: int, client: JasperRestClient, force_update: bool = False, **options):
        super().__init__(task_id, client, **options)
        self.force_update = force_update

    def do_in_background(self) -> ServerInfo:
        return self.client.get_server_info(self.force_update)


class GetResourceLookupsAsyncTask(RestAsyncTask):
    def __init__(
        self,
        task_id: int,
        client: JasperRestClient,
        folder_uri: str,
        query: Optional[str] = None,
        types: Optional[Sequence[str]] = None,
        recursive: bool = True,
        offset: int = 0,
        limit: int = 0,
        **options,
    ):
        super().__init__(task_id, client, **options)
        self.folder_uri = folder_uri
        self.query = query
        self.types = types
        self.recursive = recursive
        self.offset = offset
        self.limit = limit

    def do_in_background(self) -> ResourceLookupsList:
        return self.client.get_resource_lookups(
            self.folder_uri, self.query, self.types, self.recursive, self.offset, self.limit
        )


class GetInputControlsAsyncTask(RestAsyncTask):
    def __init__(
        self,
        task_id: int,
        client: JasperRestClient,
        report_uri: str,
        control_ids: Optional[Sequence[str]] = None,
        selected_values: Optional[Sequence[ReportParameter]] = None,
        **options,
    ):
        super().__init__(task_id, client, **options)
        self.report_uri = report_uri
        self.control_ids = control_ids
        self.selected_values = selected_values

    def do_in_background(self) -> List[InputControl]:
        return self.client.get_input_controls(self.report_uri, self.control_ids, self.selected_values)


class ValidateInputControlsAsyncTask(RestAsyncTask):
    """Result is the list of control states carrying a validation error (empty when all values are valid)."""

    def __init__(self, task_id: int, client: JasperRestClient, report_uri: str, input_controls: Sequence[InputControl], **options):
        super().__init__(task_id, client, **options)
        self.report_uri = report_uri
        self.input_controls = list(input_controls)

    def do_in_background(self) -> List[InputControlState]:
        return self.client.validate_input_controls(self.report_uri, self.input_controls)


class RunReportExecutionAsyncTask(RestAsyncTask):
    def __init__(self, task_id: int, client: JasperRestClient, request: ReportExecutionRequest, **options):
        super().__init__(task_id, client, **options)
        self.request = request

    def do_in_background(self) -> ReportExecutionResponse:
        return self.client.run_report_execution(self.request)


class SaveReportAttachmentsAsyncTask(RestAsyncTask):
    """Download the attachments of a legacy report run into ``output_dir``, one file per attachment name."""

    def __init__(
        self,
        task_id: int,
        client: JasperRestClient,
        uuid: str,
        report_attachments: Sequence[ReportAttachment],
        output_dir: Union[str, Path],
        **options,
    ):
        super().__init__(task_id, client, **options)
        self.uuid = uuid
        self.report_attachments = list(report_attachments)
        self.output_dir = Path(output_dir)

    def do_in_background(self) -> List[Path]:
        saved = []
        for attachment in self.report_attachments:
            # names come from the server and must stay inside output_dir
            if attachment.name in ("", ".", "..") or Path(attachment.name).name != attachment.name or "\\" in attachment.name:
                raise ResponseParseError(f"Unsafe attachment name: {attachment.name!r}")
        for attachment in self.report_attachments:
            if self.is_cancelled:
                break
            output_file = self.output_dir / attachment.name
            self.client.save_report_attachment_to_file(self.uuid, attachment.name, output_file)
            saved.append(output_file)
        return saved


class SaveExportOutputAsyncTask(RestAsyncTask):
    """Download the output of one export of a report execution."""

    def __init__(
        self,
        task_id: int,
        client: JasperRestClient,
        execution_id: str,
        export_output: str,
        output_file: Union[str, Path],
        **options,
    ):
        super().__init__(task_id, client, **options)
        self.execution_id = execution_id
        self.export_output = export_output
        self.output_file = Path(output_file)

    def do_in_background(self) -> Path:
        self.client.save_export_output_to_file(self.execution_id, self.export_output, self.output_file)
        return self.output_file


class RequestAsyncTask(AsyncTask):
    """Run any request object, through ``cache`` when one is given."""

    def __init__(
        self,
        task_id: int,
        request: BaseRequest,
        cache: Optional[RequestCache] = None,
        use_cache: bool = True,
        **options,
    ):
        super().__init__(task_id, **options)
        self.request = request
        self.cache = cache
        self.use_cache = use_cache

    def do_in_background(self):
        if self.cache is None:
            return self.request.load_data_from_network()
        return self.cache.execute(self.request, use_cache=self.use_cache)
