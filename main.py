"""
Hello Threads

A PyQt6 sample showing a click -> delayed background task -> one-shot
snackbar notification flow through a view model.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication

import config
from hello_threads.main_window import MainWindow

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging from config.LOGGING."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.LOGGING.get("file"):
        handlers.append(logging.FileHandler(config.LOGGING["file"]))

    logging.basicConfig(
        level=getattr(logging, str(config.LOGGING.get("level", "INFO")).upper(), logging.INFO),
        format=config.LOGGING["format"],
        handlers=handlers,
    )


def main() -> int:
    setup_logging()
    logger.info(f"Starting {config.APP_NAME} v{config.APP_VERSION}")

    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)
    app.setApplicationVersion(config.APP_VERSION)

    main_win = MainWindow()
    main_win.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
