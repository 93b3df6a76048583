"""Objects mapped from JasperReports Server responses."""

from .control import (
    InputControl,
    InputControlOption,
    InputControlsList,
    InputControlState,
    InputControlStatesList,
    ValidationRule,
)
from .lookup import ResourceLookup, ResourceLookupsList, ResourceType
from .report import (
    ErrorDescriptor,
    ExportExecution,
    ReportAttachment,
    ReportDescriptor,
    ReportExecutionRequest,
    ReportExecutionResponse,
    ReportOutputResource,
    ReportParameter,
    ReportParametersList,
)
from .resource import ResourceDescriptor, ResourceParameter, ResourceProperty, ResourcesList
from .server import ServerInfo, VersionCodes

__all__ = [
    "ErrorDescriptor",
    "ExportExecution",
    "InputControl",
    "InputControlOption",
    "InputControlsList",
    "InputControlState",
    "InputControlStatesList",
    "ReportAttachment",
    "ReportDescriptor",
    "ReportExecutionRequest",
    "ReportExecutionResponse",
    "ReportOutputResource",
    "ReportParameter",
    "ReportParametersList",
    "ResourceDescriptor",
    "ResourceLookup",
    "ResourceLookupsList",
    "ResourceParameter",
    "ResourceProperty",
    "ResourcesList",
    "ResourceType",
    "ServerInfo",
    "ValidationRule",
    "VersionCodes",
]
