"""
Main View Model - state holder for the main window

Owns the notification slot shown by the main window and the background work
that fills it. The window forwards clicks here and observes the slot; it never
touches workers or threads directly.
"""

import logging
import threading
from collections.abc import Callable
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from hello_threads.core.config_manager import ConfigManager
from hello_threads.core.observable import ObservableValue, Subscription
from hello_threads.core.task_scope import TaskScope
from hello_threads.delay_worker import DelayedMessageWorker
from hello_threads.exceptions import BackgroundTaskFailed, ConfigurationError, HolderDisposedError

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 5000
DEFAULT_MESSAGE = "Hello, from threads!"
DEFAULT_FAILURE_MESSAGE = "Background task failed"


class MainViewModel(QObject):
    """
    {
        "name": "MainViewModel",
        "version": "1.0.0",
        "description": "State holder for the main window: one notification slot and its background work.",
        "dependencies": ["ObservableValue", "TaskScope", "DelayedMessageWorker", "ConfigManager"],
        "interface": {
            "inputs": ["clicks", "acknowledgements"],
            "outputs": "Notification text published through an ObservableValue"
        }
    }

    Clicks coalesce: while a delayed task is pending, further clicks are
    ignored. All slot mutations run on the GUI thread; worker results arrive
    through queued signal connections.
    """

    busy_changed = pyqtSignal(bool)

    def __init__(self,
                 delay_ms: Optional[int] = None,
                 message: Optional[str] = None,
                 producer: Optional[Callable[[], str]] = None,
                 config_manager: Optional[ConfigManager] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize the view model.

        Args:
            delay_ms: Delay before the message is published; read from config when None
            message: Message published after the delay; read from config when None
            producer: Optional callable run on the worker thread to build the message
            config_manager: Configuration source, the shared ConfigManager by default
            parent: Parent QObject
        """
        super().__init__(parent)

        self._config = config_manager or ConfigManager()
        self._delay_ms = self._read_delay(delay_ms)
        self._message = message if message is not None else self._config.get('notification.message', DEFAULT_MESSAGE)
        if not self._message:
            raise ConfigurationError("Notification message must not be empty", config_key='notification.message')
        self._failure_message = self._config.get('notification.failure_message', DEFAULT_FAILURE_MESSAGE)
        self._producer = producer or self._produce_message

        self._notification: ObservableValue[str] = ObservableValue(name="notification")
        self._scope = TaskScope(name="MainViewModel", parent=self)
        self._pending_worker: Optional[DelayedMessageWorker] = None
        self._disposed = False

        logger.info(f"MainViewModel initialized (delay: {self._delay_ms} ms)")

    def _read_delay(self, delay_ms: Optional[int]) -> int:
        raw = delay_ms if delay_ms is not None else self._config.get('notification.delay_ms', DEFAULT_DELAY_MS)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid delay: {raw!r}", config_key='notification.delay_ms')
        if value <= 0:
            raise ConfigurationError(f"Delay must be positive, got {value}", config_key='notification.delay_ms')
        return value

    # Public API for the view

    @property
    def notification(self) -> ObservableValue:
        return self._notification

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def is_busy(self) -> bool:
        return self._pending_worker is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def subscribe(self, callback: Callable[[Optional[str]], None]) -> Subscription:
        """Observe the notification slot. See ObservableValue.subscribe()."""
        return self._notification.subscribe(callback)

    def handle_click(self) -> bool:
        """
        Start the delayed task unless one is already pending.

        Returns:
            True if a task was started, False if the click was ignored
        """
        logger.debug(f"Click handled on thread: {threading.current_thread().name}")

        if self._disposed:
            logger.warning("Click ignored: view model already disposed")
            return False

        if self._pending_worker is not None:
            logger.warning("Already waiting for a delayed message, ignoring click")
            return False

        worker = DelayedMessageWorker(self._delay_ms, self._producer)
        worker.result_ready.connect(self._on_result_ready)
        worker.error_occurred.connect(self._on_task_failed)
        worker.finished.connect(self._on_worker_finished)

        try:
            self._scope.launch(worker)
        except HolderDisposedError:
            return False

        self._pending_worker = worker
        self.busy_changed.emit(True)
        return True

    def acknowledge(self) -> None:
        """Clear the notification slot once the view has shown it."""
        if self._disposed or self._notification.value is None:
            return
        self._notification.set(None)

    def dispose(self) -> None:
        """
        Cancel all background work and detach observers.
        Safe to call more than once.
        """
        if self._disposed:
            return
        self._disposed = True
        self._pending_worker = None
        self._scope.close()
        self._notification.clear_subscribers()
        logger.info("MainViewModel disposed")

    # Worker callbacks (GUI thread)

    def _produce_message(self) -> str:
        return self._message

    def _release_pending(self, worker: Optional[QObject]) -> None:
        if worker is not None and worker is self._pending_worker:
            self._pending_worker = None
            self.busy_changed.emit(False)

    def _on_result_ready(self, message: str) -> None:
        if self._disposed:
            logger.debug("Dropping delayed message: view model disposed")
            return
        self._release_pending(self.sender())
        self._notification.set(message)

    def _on_task_failed(self, error_message: str) -> None:
        if self._disposed:
            return
        self._release_pending(self.sender())
        error = BackgroundTaskFailed(error_message, task_name="delayed_message",
                                     user_message=self._failure_message)
        self._notification.set(error.user_message)

    def _on_worker_finished(self) -> None:
        if self._disposed:
            return
        # Covers workers that finish without a result (cancelled)
        self._release_pending(self.sender())
