"""
Background task with progress reporting to a detachable tracker.

A task runs ``do_in_background`` on a worker thread and reports its outcome to
the tracker attached at that moment. If no tracker is attached (for instance
while the UI that owns it is being rebuilt) the outcome is held back and
delivered as soon as a tracker is attached again.
"""

import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

from ..exceptions import TaskError
from ..logging_config import get_logger
from ..rest_client import JasperRestClient

logger = get_logger(__name__)


class TaskStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    FINISHED = "finished"
    CANCELLED = "cancelled"


class ProgressTracker(ABC):
    """Receives progress and completion events of async tasks."""

    @abstractmethod
    def on_progress(self, task: "AsyncTask", message: str) -> None:
        pass

    @abstractmethod
    def on_complete(self, task: "AsyncTask") -> None:
        pass

    @abstractmethod
    def on_exception(self, task: "AsyncTask") -> None:
        pass


class AsyncTask:
    """
    Unit of background work identified by ``task_id``.

    Args:
        task_id: Identifier the caller uses to tell results apart
        progress_message: Message for the progress dialog; None runs the task without a dialog
        show_dialog_timeout: Seconds to wait before showing the dialog, so quick tasks never flash it
    """

    def __init__(self, task_id: int, progress_message: Optional[str] = None, show_dialog_timeout: float = 0.0):
        self.task_id = task_id
        self.progress_message = progress_message
        self.show_dialog_timeout = show_dialog_timeout

        self.status = TaskStatus.PENDING
        self.result: Any = None
        self.task_exception: Optional[Exception] = None

        self._tracker: Optional[ProgressTracker] = None
        self._last_progress: Optional[str] = None
        self._reported = False
        self._lock = threading.RLock()
        self._done = threading.Event()
        self._progress_timer: Optional[threading.Timer] = None
        self._thread: Optional[threading.Thread] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.task_id} status={self.status.value}>"

    @property
    def show_progress_dialog(self) -> bool:
        return self.progress_message is not None

    @property
    def is_cancelled(self) -> bool:
        return self.status is TaskStatus.CANCELLED

    @property
    def is_finished(self) -> bool:
        return self.status is TaskStatus.FINISHED

    @property
    def progress_tracker(self) -> Optional[ProgressTracker]:
        return self._tracker

    def set_progress_tracker(self, tracker: Optional[ProgressTracker]) -> None:
        """
        Attach or detach (None) the tracker.

        Attaching to a running task replays its last progress message; attaching
        to a finished task that has not reported yet delivers the outcome now.
        """
        replay_progress = None
        deliver = False
        with self._lock:
            self._tracker = tracker
            if tracker is None:
                return
            if self.status is TaskStatus.RUNNING:
                replay_progress = self._last_progress
            elif self.status is TaskStatus.FINISHED and not self._reported:
                self._reported = True
                deliver = True

        if replay_progress is not None:
            tracker.on_progress(self, replay_progress)
        if deliver:
            self._report(tracker)

    def execute(self) -> "AsyncTask":
        """Start the task on a worker thread."""
        with self._lock:
            if self.status is not TaskStatus.PENDING:
                raise TaskError(f"Task {self.task_id} cannot be executed: it is {self.status.value}", task_id=self.task_id)
            self.status = TaskStatus.RUNNING

        self.on_pre_execute()
        self._thread = threading.Thread(target=self._run, name=f"jasper-task-{self.task_id}", daemon=True)
        self._thread.start()
        return self

    def on_pre_execute(self) -> None:
        if not self.show_progress_dialog:
            return
        if self.show_dialog_timeout > 0:
            self._progress_timer = threading.Timer(self.show_dialog_timeout, self.publish_progress, args=(self.progress_message,))
            self._progress_timer.daemon = True
            self._progress_timer.start()
        else:
            self.publish_progress(self.progress_message)

    def publish_progress(self, message: str) -> None:
        with self._lock:
            if self.status is not TaskStatus.RUNNING:
                return
            self._last_progress = message
            tracker = self._tracker
        if tracker is not None:
            tracker.on_progress(self, message)

    def do_in_background(self) -> Any:
        """Work of the task; its return value becomes ``result``."""
        raise NotImplementedError

    def _run(self) -> None:
        try:
            self.result = self.do_in_background()
        except Exception as e:
            logger.error(f"❌ Task {self.task_id} failed: {e}")
            self.task_exception = e
        self._finish()

    def _finish(self) -> None:
        with self._lock:
            self._cancel_progress_timer()
            if self.status is TaskStatus.CANCELLED:
                self._done.set()
                return
            self.status = TaskStatus.FINISHED
            tracker = self._tracker
            if tracker is not None:
                self._reported = True

        try:
            if tracker is not None:
                self._report(tracker)
            else:
                logger.debug(f"Task {self.task_id} finished while detached, holding result")
        finally:
            self._done.set()

    def _report(self, tracker: ProgressTracker) -> None:
        if self.task_exception is not None:
            tracker.on_exception(self)
        else:
            tracker.on_complete(self)

    def _cancel_progress_timer(self) -> None:
        if self._progress_timer is not None:
            self._progress_timer.cancel()
            self._progress_timer = None

    def cancel(self) -> bool:
        """
        Cancel the task. A cancelled task never reports to its tracker.

        Work already running is not interrupted; ``do_in_background``
        implementations check ``is_cancelled`` between steps.

        Returns:
            False if the task had already finished or been cancelled
        """
        with self._lock:
            if self.status in (TaskStatus.FINISHED, TaskStatus.CANCELLED):
                return False
            self.status = TaskStatus.CANCELLED
            self._cancel_progress_timer()
        logger.info(f"🛑 Task {self.task_id} cancelled")
        self._done.set()
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the task finished (and reported, if a tracker was attached) or was cancelled."""
        return self._done.wait(timeout)


class RestAsyncTask(AsyncTask):
    """Async task working with a JasperRestClient."""

    def __init__(
        self,
        task_id: int,
        client: JasperRestClient,
        progress_message: Optional[str] = None,
        show_dialog_timeout: float = 0.0,
    ):
        super().__init__(task_id, progress_message, show_dialog_timeout)
        self.client = client
