"""
Snackbar widget for transient, auto-dismissing notifications.
Shows a single line of text anchored to the bottom of its parent.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QEasingCurve, QPropertyAnimation, Qt, QTimer
from PyQt6.QtWidgets import QGraphicsOpacityEffect, QHBoxLayout, QLabel, QWidget

from hello_threads.core.config_manager import ConfigManager
from hello_threads.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Snackbar(QWidget):
    """
    A child widget that shows a message for a short time and hides itself.
    Showing a new message while one is visible replaces the text and
    restarts the dismiss timer.
    """

    def __init__(self, parent=None, config_manager: Optional[ConfigManager] = None):
        super().__init__(parent)
        self._config = config_manager or ConfigManager()

        self.duration_ms = self._read_duration()
        self.margin = int(self._config.get('snackbar.margin', 16))
        fade_ms = int(self._config.get('snackbar.fade_ms', 200))

        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground)
        self.setMinimumHeight(int(self._config.get('snackbar.min_height', 48)))
        self.setStyleSheet(self._build_stylesheet())

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 8)
        self.label = QLabel(self)
        self.label.setWordWrap(True)
        layout.addWidget(self.label)

        # Auto-dismiss timer
        self.dismiss_timer = QTimer(self)
        self.dismiss_timer.setSingleShot(True)
        self.dismiss_timer.timeout.connect(self._fade_out)

        # Fade animations
        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)

        self.fade_in_animation = QPropertyAnimation(self.opacity_effect, b"opacity", self)
        self.fade_in_animation.setDuration(fade_ms)
        self.fade_in_animation.setStartValue(0.0)
        self.fade_in_animation.setEndValue(1.0)
        self.fade_in_animation.setEasingCurve(QEasingCurve.Type.InOutQuad)

        self.fade_out_animation = QPropertyAnimation(self.opacity_effect, b"opacity", self)
        self.fade_out_animation.setDuration(fade_ms)
        self.fade_out_animation.setStartValue(1.0)
        self.fade_out_animation.setEndValue(0.0)
        self.fade_out_animation.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self.fade_out_animation.finished.connect(self.hide)

        self.hide()

    def _read_duration(self) -> int:
        raw = self._config.get('snackbar.duration_ms', 1500)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid snackbar duration: {raw!r}", config_key='snackbar.duration_ms')
        if value <= 0:
            raise ConfigurationError(f"Snackbar duration must be positive, got {value}",
                                     config_key='snackbar.duration_ms')
        return value

    def _build_stylesheet(self) -> str:
        background = self._config.get('snackbar.colors.background', '#323232')
        text = self._config.get('snackbar.colors.text', '#FFFFFF')
        font_size = self._config.get('snackbar.font_size', 14)
        return (
            f"Snackbar {{ background-color: {background}; border-radius: 4px; }}"
            f"QLabel {{ color: {text}; font-size: {font_size}px; }}"
        )

    def message(self) -> str:
        return self.label.text()

    def show_message(self, text: str, duration_ms: Optional[int] = None) -> None:
        """
        Show text and schedule the automatic dismissal.

        Args:
            text: Message to display
            duration_ms: How long to stay visible; the configured duration when None
        """
        self.fade_out_animation.stop()
        self.label.setText(text)
        self.reposition()
        self.show()
        self.raise_()

        self.fade_in_animation.start()
        self.dismiss_timer.start(duration_ms if duration_ms is not None else self.duration_ms)
        logger.debug(f"Snackbar shown: {text!r}")

    def dismiss(self) -> None:
        """Hide immediately, cancelling any pending dismissal."""
        self.dismiss_timer.stop()
        self.fade_in_animation.stop()
        self.fade_out_animation.stop()
        self.hide()

    def reposition(self) -> None:
        """Stretch across the bottom of the parent, inside the margins."""
        parent = self.parentWidget()
        if parent is None:
            return
        width = max(0, parent.width() - 2 * self.margin)
        self.setFixedWidth(width)
        self.adjustSize()
        self.move(self.margin, parent.height() - self.height() - self.margin)

    def _fade_out(self) -> None:
        self.fade_in_animation.stop()
        self.fade_out_animation.start()

    def closeEvent(self, event):
        """Clean up when widget is closed."""
        self.dismiss_timer.stop()
        super().closeEvent(event)
