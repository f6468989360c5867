"""
Main window of the Hello Threads sample.

The whole window is one clickable surface. A click asks the view model to
start its delayed task; when the view model publishes a message the window
shows it in a snackbar and acknowledges it.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QPushButton, QSizePolicy

from hello_threads.controllers.main_view_model import MainViewModel
from hello_threads.core.config_manager import ConfigManager
from hello_threads.core.observable import Subscription
from hello_threads.snackbar import Snackbar

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    View for MainViewModel. Observes the notification slot only while shown,
    and disposes the view model when closed.
    """

    def __init__(self, view_model: Optional[MainViewModel] = None,
                 config_manager: Optional[ConfigManager] = None):
        super().__init__()
        self._config = config_manager or ConfigManager()
        self.view_model = view_model or MainViewModel(config_manager=self._config)

        self.setWindowTitle(self._config.get('main_window.title', 'Hello Threads'))
        self.resize(int(self._config.get('main_window.width', 480)),
                    int(self._config.get('main_window.height', 640)))

        self._subscription: Optional[Subscription] = None
        self._last_seen: Optional[str] = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        self.root_button = QPushButton(self._config.get('main_window.prompt', 'Tap anywhere'))
        self.root_button.setFlat(True)
        self.root_button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCentralWidget(self.root_button)

        self.snackbar = Snackbar(self, config_manager=self._config)

    def _connect_signals(self):
        self.root_button.clicked.connect(self.on_clicked)
        self.view_model.busy_changed.connect(self._on_busy_changed)

    @property
    def is_observing(self) -> bool:
        return self._subscription is not None

    def on_clicked(self):
        self.view_model.handle_click()

    def _on_notification_changed(self, value: Optional[str]) -> None:
        previous = self._last_seen
        self._last_seen = value
        if value and not previous:
            self.snackbar.show_message(value)
            self.view_model.acknowledge()

    def _on_busy_changed(self, busy: bool) -> None:
        if busy:
            self.statusBar().showMessage(self._config.get('main_window.busy_text', 'Working...'))
        else:
            self.statusBar().clearMessage()

    def _start_observing(self) -> None:
        if self._subscription is None and not self.view_model.is_disposed:
            self._subscription = self.view_model.subscribe(self._on_notification_changed)
            logger.debug("MainWindow started observing notifications")

    def _stop_observing(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
            self._last_seen = None
            logger.debug("MainWindow stopped observing notifications")

    def showEvent(self, event):
        super().showEvent(event)
        self._start_observing()

    def hideEvent(self, event):
        self._stop_observing()
        super().hideEvent(event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.snackbar.isVisible():
            self.snackbar.reposition()

    def closeEvent(self, event):
        """Detach from the view model and cancel its background work."""
        self._stop_observing()
        self.snackbar.dismiss()
        self.view_model.dispose()
        super().closeEvent(event)
