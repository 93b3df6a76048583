"""
Async task manager

Keeps the list of in-flight tasks, drives one shared progress dialog and
forwards task outcomes to a callback listener. Tasks can be detached from the
manager and handed to a new one (``retain_tasks`` / ``handle_retained_tasks``)
when the owner is rebuilt while work is still running.
"""

import threading
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..logging_config import get_logger
from .base import AsyncTask, ProgressTracker
from .dialogs import ConsoleProgressDialog, ProgressDialog

logger = get_logger(__name__)


class TaskCallbackListener(ABC):
    """Owner of the tasks; told about every finished or cancelled task."""

    @abstractmethod
    def on_task_complete(self, task: AsyncTask) -> None:
        pass

    @abstractmethod
    def on_task_exception(self, task: AsyncTask) -> None:
        pass


class AsyncTaskManager(ProgressTracker):
    """Runs async tasks and tracks them until they report back."""

    def __init__(self, listener: TaskCallbackListener, progress_dialog: Optional[ProgressDialog] = None):
        """
        Initialize the task manager.

        Args:
            listener: Receives completion and exception callbacks
            progress_dialog: Dialog to drive; a cancelable ConsoleProgressDialog
                wired to ``on_cancel`` when omitted
        """
        self.listener = listener

        if progress_dialog is None:
            progress_dialog = ConsoleProgressDialog(cancelable=True)
            progress_dialog.set_on_cancel_listener(self.on_cancel)
            progress_dialog.dismiss()
        self.progress_dialog = progress_dialog

        self._tasks: List[AsyncTask] = []
        self._lock = threading.RLock()

    @property
    def tasks(self) -> List[AsyncTask]:
        with self._lock:
            return list(self._tasks)

    def execute_task(self, task: AsyncTask) -> AsyncTask:
        """Track ``task``, attach this manager as its tracker and start it."""
        with self._lock:
            self._tasks.append(task)
        task.set_progress_tracker(self)
        logger.debug(f"▶️  Executing task {task.task_id}")
        return task.execute()

    def on_progress(self, task: AsyncTask, message: str) -> None:
        if not task.show_progress_dialog:
            return
        with self._lock:
            # late message from a task that already finished or was cancelled
            if task not in self._tasks:
                return
            # dialog may have been dismissed while the tasks were detached
            if not self.progress_dialog.is_showing():
                self.progress_dialog.show()
            self.progress_dialog.set_message(message)

    def on_cancel(self, dialog: Optional[ProgressDialog] = None) -> None:
        """Cancel every in-flight task; each one is reported to the listener as complete."""
        with self._lock:
            for task in list(self._tasks):
                task.cancel()
                self.listener.on_task_complete(task)
                self._tasks.remove(task)

    def on_complete(self, task: AsyncTask) -> None:
        with self._lock:
            if task not in self._tasks:
                # already reported by on_cancel
                return
            self.listener.on_task_complete(task)
            self._forget(task)
            self._finish_task_handler(task)

    def on_exception(self, task: AsyncTask) -> None:
        with self._lock:
            if task not in self._tasks:
                return
            self.listener.on_task_exception(task)
            self._forget(task)
            self._finish_task_handler(task)

    def retain_tasks(self) -> List[AsyncTask]:
        """Detach all in-flight tasks from this manager and return them for a successor."""
        with self._lock:
            for task in self._tasks:
                task.set_progress_tracker(None)
            logger.debug(f"Retaining {len(self._tasks)} task(s)")
            return list(self._tasks)

    def handle_retained_tasks(self, retained_tasks: Optional[Iterable[AsyncTask]]) -> None:
        """
        Adopt tasks retained by a previous manager.

        Tasks that finished in the meantime report immediately.
        """
        if retained_tasks is None:
            return
        retained_tasks = list(retained_tasks)
        with self._lock:
            for task in retained_tasks:
                if task not in self._tasks:
                    self._tasks.append(task)
            for task in retained_tasks:
                task.set_progress_tracker(self)

    def is_working(self) -> bool:
        with self._lock:
            return bool(self._tasks)

    def is_task_working(self, task: AsyncTask) -> bool:
        with self._lock:
            return task in self._tasks

    def _forget(self, task: AsyncTask) -> None:
        if task in self._tasks:
            self._tasks.remove(task)

    def _finish_task_handler(self, task: AsyncTask) -> None:
        """Close the progress dialog once the last task is done, if this task used it."""
        if task.show_progress_dialog and not self._tasks:
            self.progress_dialog.dismiss()
