"""
Test suite for the Snackbar component.

Covers:
- Initial hidden state
- Showing and replacing messages
- Automatic and manual dismissal
- Placement at the bottom of the parent
"""

import pytest
from PyQt6.QtWidgets import QWidget

import config
from hello_threads.core.config_manager import ConfigManager
from hello_threads.exceptions import ConfigurationError
from hello_threads.snackbar import Snackbar


@pytest.fixture
def parent(qtbot):
    parent = QWidget()
    parent.resize(400, 300)
    qtbot.addWidget(parent)
    parent.show()
    return parent


@pytest.fixture
def snackbar(parent, config_manager):
    return Snackbar(parent, config_manager=config_manager)


class TestSnackbar:
    """Test suite for Snackbar basic functionality."""

    def test_initialization(self, snackbar, parent):
        assert snackbar.parent() is parent
        assert not snackbar.isVisible()
        assert snackbar.duration_ms == int(config.SNACKBAR['duration_ms'])
        assert snackbar.dismiss_timer.isSingleShot()

    def test_show_message(self, qtbot, snackbar):
        snackbar.show_message("Hello, from threads!")

        qtbot.waitUntil(snackbar.isVisible, timeout=1000)
        assert snackbar.message() == "Hello, from threads!"
        assert snackbar.dismiss_timer.isActive()

    def test_auto_dismiss(self, qtbot, snackbar):
        snackbar.show_message("short lived", duration_ms=30)

        qtbot.waitUntil(lambda: not snackbar.isVisible(), timeout=2000)
        assert not snackbar.dismiss_timer.isActive()

    def test_new_message_replaces_current(self, snackbar):
        snackbar.show_message("first", duration_ms=10_000)
        snackbar.show_message("second", duration_ms=10_000)

        assert snackbar.message() == "second"
        assert snackbar.isVisible()
        assert snackbar.dismiss_timer.remainingTime() > 5_000

    def test_dismiss_hides_immediately(self, snackbar):
        snackbar.show_message("bye", duration_ms=10_000)

        snackbar.dismiss()

        assert not snackbar.isVisible()
        assert not snackbar.dismiss_timer.isActive()

    def test_positioned_at_bottom_of_parent(self, snackbar, parent):
        snackbar.show_message("placed")

        margin = snackbar.margin
        assert snackbar.x() == margin
        assert snackbar.width() == parent.width() - 2 * margin
        assert snackbar.y() + snackbar.height() == parent.height() - margin

    def test_duration_from_environment(self, parent, env_config):
        env_config(HELLO_THREADS_SNACKBAR_MS="2750")

        snackbar = Snackbar(parent, config_manager=ConfigManager())

        assert snackbar.duration_ms == 2750

    @pytest.mark.parametrize("duration", ["later", "0"])
    def test_invalid_duration_from_environment(self, parent, env_config, duration):
        env_config(HELLO_THREADS_SNACKBAR_MS=duration)

        with pytest.raises(ConfigurationError):
            Snackbar(parent, config_manager=ConfigManager())
