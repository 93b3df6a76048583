"""
Progress dialogs driven by the task manager.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..logging_config import get_logger

logger = get_logger(__name__)

CancelListener = Callable[["ProgressDialog"], None]


class ProgressDialog(ABC):
    """Modal progress indicator; subclasses decide how it is rendered."""

    def __init__(self, cancelable: bool = True):
        self.cancelable = cancelable
        self.message: Optional[str] = None
        self._showing = False
        self._on_cancel: Optional[CancelListener] = None

    def set_on_cancel_listener(self, listener: Optional[CancelListener]) -> None:
        self._on_cancel = listener

    def is_showing(self) -> bool:
        return self._showing

    def show(self) -> None:
        if not self._showing:
            self._showing = True
            self.on_show()

    def dismiss(self) -> None:
        if self._showing:
            self._showing = False
            self.on_dismiss()

    def set_message(self, message: str) -> None:
        self.message = message
        self.on_message(message)

    def cancel(self) -> bool:
        """User cancel: dismiss and notify the cancel listener. Ignored if not cancelable."""
        if not self.cancelable:
            return False
        self.dismiss()
        if self._on_cancel is not None:
            self._on_cancel(self)
        return True

    @abstractmethod
    def on_show(self) -> None:
        pass

    @abstractmethod
    def on_dismiss(self) -> None:
        pass

    @abstractmethod
    def on_message(self, message: str) -> None:
        pass


class ConsoleProgressDialog(ProgressDialog):
    """Progress dialog rendered as log lines."""

    def on_show(self) -> None:
        logger.info("⏳ Working...")

    def on_dismiss(self) -> None:
        logger.info("✅ Done")

    def on_message(self, message: str) -> None:
        if self._showing:
            logger.info(f"⏳ {message}")
