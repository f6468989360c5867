"""
Task Scope

Owns the background workers started on behalf of one state holder and ties
their lifetime to it: closing the scope cancels every worker it launched and
refuses new ones.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, QThread

from hello_threads.exceptions import HolderDisposedError

logger = logging.getLogger(__name__)


class TaskScope(QObject):
    """
    {
        "name": "TaskScope",
        "version": "1.0.0",
        "description": "Lifetime scope for QThread workers owned by a single state holder.",
        "dependencies": ["PyQt6.QtCore"],
        "interface": {
            "inputs": ["worker: QThread"],
            "outputs": "Started workers, cancelled together on close()"
        }
    }

    A scope is never shared between holders. Must be used from the thread it
    lives in (the GUI thread).
    """

    # How long close() waits for each cancelled worker to exit
    JOIN_TIMEOUT_MS = 2000

    def __init__(self, name: str = "scope", parent: Optional[QObject] = None):
        super().__init__(parent)
        self.name = name
        self._workers: set[QThread] = set()
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def active_count(self) -> int:
        return len(self._workers)

    def launch(self, worker: QThread) -> QThread:
        """
        Register a worker with this scope and start it.
        Args:
            worker: A configured, not yet started QThread
        Returns:
            The started worker
        Raises:
            HolderDisposedError: If the scope has been closed
        """
        if self._closed:
            raise HolderDisposedError(
                f"Cannot launch work on closed scope '{self.name}'", scope_name=self.name
            )

        self._workers.add(worker)
        worker.finished.connect(self._on_worker_finished)
        worker.start()
        logger.debug(f"Scope '{self.name}' launched worker ({len(self._workers)} active)")
        return worker

    def close(self) -> None:
        """
        Cancel all workers, wait for them to exit and refuse further launches.
        Closing an already closed scope does nothing.
        """
        if self._closed:
            return
        self._closed = True

        workers = list(self._workers)
        for worker in workers:
            # Results queued or emitted from here on must not reach the holder
            worker.blockSignals(True)
            self._cancel_worker(worker)

        for worker in workers:
            if not worker.wait(self.JOIN_TIMEOUT_MS):
                logger.warning(f"Worker in scope '{self.name}' did not stop within {self.JOIN_TIMEOUT_MS} ms")
        self._workers.clear()
        logger.info(f"Scope '{self.name}' closed, {len(workers)} worker(s) cancelled")

    def _cancel_worker(self, worker: QThread) -> None:
        cancel = getattr(worker, "cancel", None)
        if callable(cancel):
            cancel()
        else:
            worker.requestInterruption()

    def _on_worker_finished(self) -> None:
        worker = self.sender()
        if worker not in self._workers:
            return
        # finished is emitted from the worker thread just before it exits
        worker.wait()
        self._workers.discard(worker)
        worker.deleteLater()
