"""
TaskTracker entry point
Task list with status filters and a periodic reminder from the system tray.
"""

from __future__ import annotations

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from tasktracker.main_window import MainWindow
from tasktracker.ui.windows import TrayController
from tasktracker.utils import get_data_dir


def setup_logging() -> None:
    log_dir = get_data_dir()
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "app.log")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("TaskTracker")
    # Keep running in the tray after the window is closed.
    app.setQuitOnLastWindowClosed(not TrayController.is_available())

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
