"""Background tasks, the task manager and progress dialogs."""

from .base import AsyncTask, ProgressTracker, RestAsyncTask, TaskStatus
from .dialogs import ConsoleProgressDialog, ProgressDialog
from .manager import AsyncTaskManager, TaskCallbackListener
from .rest_tasks import (
    GetInputControlsAsyncTask,
    GetResourceLookupsAsyncTask,
    GetServerInfoAsyncTask,
    RequestAsyncTask,
    RunReportExecutionAsyncTask,
    SaveExportOutputAsyncTask,
    SaveReportAttachmentsAsyncTask,
    ValidateInputControlsAsyncTask,
)

__all__ = [
    "AsyncTask",
    "AsyncTaskManager",
    "ConsoleProgressDialog",
    "GetInputControlsAsyncTask",
    "GetResourceLookupsAsyncTask",
    "GetServerInfoAsyncTask",
    "ProgressDialog",
    "ProgressTracker",
    "RequestAsyncTask",
    "RestAsyncTask",
    "RunReportExecutionAsyncTask",
    "SaveExportOutputAsyncTask",
    "SaveReportAttachmentsAsyncTask",
    "TaskCallbackListener",
    "TaskStatus",
    "ValidateInputControlsAsyncTask",
]
