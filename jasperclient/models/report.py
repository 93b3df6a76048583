"""
Report models: XML report descriptors of the legacy report service and the
JSON documents of the report execution service.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .resource import XmlSource, json_objects, parse_xml


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class ReportParameter:
    """Report input value; a parameter may carry several values."""

    name: str
    values: List[str] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.values, str):
            self.values = [self.values]
        else:
            self.values = list(self.values)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReportParameter":
        return cls(name=data.get("name", ""), values=data.get("value") or [])

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": list(self.values)}


@dataclass
class ReportParametersList:
    report_parameters: List[ReportParameter] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"reportParameter": [parameter.to_dict() for parameter in self.report_parameters]}


@dataclass
class ReportAttachment:
    """File produced by a report run: the report itself or an image it references."""

    name: str
    type: Optional[str] = None


@dataclass
class ReportDescriptor:
    """Result of running a report through the legacy report service."""

    uuid: Optional[str] = None
    original_uri: Optional[str] = None
    total_pages: int = 0
    start_page: int = 0
    end_page: int = 0
    attachments: List[ReportAttachment] = field(default_factory=list)

    @classmethod
    def from_xml(cls, source: XmlSource) -> "ReportDescriptor":
        root = parse_xml(source, "report")
        return cls(
            uuid=root.findtext("uuid"),
            original_uri=root.findtext("originalUri"),
            total_pages=_to_int(root.findtext("totalPages")),
            start_page=_to_int(root.findtext("startPage")),
            end_page=_to_int(root.findtext("endPage")),
            attachments=[
                ReportAttachment(name=(element.text or "").strip(), type=element.get("type"))
                for element in root.findall("file")
            ],
        )


@dataclass
class ErrorDescriptor:
    error_code: Optional[str] = None
    message: Optional[str] = None
    parameters: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["ErrorDescriptor"]:
        if not data:
            return None
        return cls(
            error_code=data.get("errorCode"),
            message=data.get("message"),
            parameters=list(data.get("parameters") or []),
        )


@dataclass
class ReportOutputResource:
    content_type: Optional[str] = None
    file_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["ReportOutputResource"]:
        if not data:
            return None
        return cls(content_type=data.get("contentType"), file_name=data.get("fileName"))


@dataclass
class ExportExecution:
    """One requested export (e.g. ``html``) of a report execution."""

    id: str
    status: Optional[str] = None
    output_resource: Optional[ReportOutputResource] = None
    attachments: List[ReportOutputResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportExecution":
        return cls(
            id=data.get("id", ""),
            status=data.get("status"),
            output_resource=ReportOutputResource.from_dict(data.get("outputResource")),
            attachments=[ReportOutputResource.from_dict(item) for item in json_objects(data, "attachments")],
        )


@dataclass
class ReportExecutionRequest:
    """Body of ``POST /rest_v2/reportExecutions``."""

    report_unit_uri: str
    output_format: str = "html"
    async_: bool = False
    fresh_data: bool = False
    save_data_snapshot: bool = False
    interactive: bool = True
    ignore_pagination: Optional[bool] = None
    pages: Optional[str] = None
    attachments_prefix: Optional[str] = None
    parameters: List[ReportParameter] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "reportUnitUri": self.report_unit_uri,
            "outputFormat": self.output_format,
            "async": self.async_,
            "freshData": self.fresh_data,
            "saveDataSnapshot": self.save_data_snapshot,
            "interactive": self.interactive,
        }
        if self.ignore_pagination is not None:
            body["ignorePagination"] = self.ignore_pagination
        if self.pages is not None:
            body["pages"] = self.pages
        if self.attachments_prefix is not None:
            body["attachmentsPrefix"] = self.attachments_prefix
        if self.parameters:
            body["parameters"] = ReportParametersList(self.parameters).to_dict()
        return body


@dataclass
class ReportExecutionResponse:
    request_id: Optional[str] = None
    report_uri: Optional[str] = None
    status: Optional[str] = None
    current_page: int = 0
    total_pages: int = 0
    exports: List[ExportExecution] = field(default_factory=list)
    error_descriptor: Optional[ErrorDescriptor] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReportExecutionResponse":
        return cls(
            request_id=data.get("requestId"),
            report_uri=data.get("reportURI"),
            status=data.get("status"),
            current_page=_to_int(data.get("currentPage")),
            total_pages=_to_int(data.get("totalPages")),
            exports=[ExportExecution.from_dict(item) for item in json_objects(data, "exports")],
            error_descriptor=ErrorDescriptor.from_dict(data.get("errorDescriptor")),
        )

    @property
    def is_ready(self) -> bool:
        return self.status == "ready"

    @property
    def is_failed(self) -> bool:
        return self.status in ("failed", "cancelled")

    def get_export(self, export_id: str) -> Optional[ExportExecution]:
        for export in self.exports:
            if export.id == export_id:
                return export
        return None
