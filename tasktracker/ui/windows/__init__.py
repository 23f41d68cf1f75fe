"""UI window modules."""

from tasktracker.ui.windows.main_window_constants import (
    ALL_DELETED_MESSAGE,
    DEFAULT_REMINDER_INTERVAL_MINUTES,
    ERROR_SNACKBAR_DURATION_MS,
    SNACKBAR_DURATION_MS,
    WINDOW_TITLE,
)
from tasktracker.ui.windows.main_window_state_store import MainWindowState, MainWindowStateStore
from tasktracker.ui.windows.tray_controller import TrayCallbacks, TrayController, create_app_icon

__all__ = [
    "ALL_DELETED_MESSAGE",
    "DEFAULT_REMINDER_INTERVAL_MINUTES",
    "ERROR_SNACKBAR_DURATION_MS",
    "SNACKBAR_DURATION_MS",
    "WINDOW_TITLE",
    "MainWindowState",
    "MainWindowStateStore",
    "TrayCallbacks",
    "TrayController",
    "create_app_icon",
]
