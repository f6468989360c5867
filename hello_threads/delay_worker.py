"""
Delayed Message Worker

This module provides the DelayedMessageWorker class, which waits a fixed delay
in a separate thread and then produces the message to show to the user.
"""

import logging
import threading
from collections.abc import Callable

from PyQt6.QtCore import QDeadlineTimer, QMutex, QThread, QWaitCondition, pyqtSignal

logger = logging.getLogger(__name__)


class DelayedMessageWorker(QThread):
    """
    {
        "name": "DelayedMessageWorker",
        "version": "1.0.0",
        "description": "A QThread subclass that waits a delay and then produces a message.",
        "dependencies": [],
        "interface": {
            "inputs": [
                {"name": "delay_ms", "type": "int"},
                {"name": "producer", "type": "Callable[[], str]"}
            ],
            "outputs": "Emits result_ready or error_occurred unless cancelled"
        }
    }

    The delay is an interruptible wait: cancel() wakes the thread at once and
    a cancelled worker never emits a result or an error.
    """

    result_ready = pyqtSignal(str)  # Emits the produced message
    error_occurred = pyqtSignal(str)  # Emits "<ExceptionType>: <details>"

    def __init__(self, delay_ms: int, producer: Callable[[], str], parent=None):
        """
        @param {int} delay_ms - Milliseconds to wait before producing the message.
        @param {Callable} producer - Called on the worker thread after the delay.
        @param {QObject} parent - The parent QObject.
        @raises {ValueError} - If the delay is negative or the producer is missing.
        """
        super().__init__(parent)

        if delay_ms < 0:
            raise ValueError("Delay must be zero or a positive number of milliseconds")
        if producer is None:
            raise ValueError("Message producer is required")

        self.delay_ms = delay_ms
        self.producer = producer

        self._mutex = QMutex()
        self._wake = QWaitCondition()
        self._cancelled = False

    def cancel(self) -> None:
        """Request cancellation and wake the worker if it is waiting."""
        self._mutex.lock()
        try:
            self._cancelled = True
            self._wake.wakeAll()
        finally:
            self._mutex.unlock()
        self.requestInterruption()

    def is_cancelled(self) -> bool:
        self._mutex.lock()
        try:
            return self._cancelled
        finally:
            self._mutex.unlock()

    def run(self):
        """
        Wait for the delay, then produce the message and emit it.
        """
        logger.debug(f"Delayed task started on thread: {threading.current_thread().name}")

        if not self._wait_for_delay():
            logger.info("Delayed task cancelled before the delay elapsed")
            return

        try:
            message = self.producer()
        except Exception as e:
            if self.is_cancelled():
                return
            error_message = f"{type(e).__name__}: {e}"
            logger.error(f"Delayed task failed: {error_message}")
            self.error_occurred.emit(error_message)
            return

        if self.is_cancelled():
            logger.info("Delayed task cancelled after producing its message")
            return

        logger.debug(f"Delayed task finished on thread: {threading.current_thread().name}")
        self.result_ready.emit(message)

    def _wait_for_delay(self) -> bool:
        """Block until the delay elapses. Returns False if cancelled meanwhile."""
        deadline = QDeadlineTimer(self.delay_ms)
        self._mutex.lock()
        try:
            while not self._cancelled:
                if not self._wake.wait(self._mutex, deadline):
                    break  # timed out
            return not self._cancelled
        finally:
            self._mutex.unlock()
