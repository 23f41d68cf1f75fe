"""Constants used by the main task window."""

from __future__ import annotations

WINDOW_TITLE = "Tasks"
DEFAULT_WINDOW_WIDTH = 420
DEFAULT_WINDOW_HEIGHT = 640
MIN_WINDOW_WIDTH = 320
MAX_WINDOW_WIDTH = 1200
MIN_WINDOW_HEIGHT = 400
MAX_WINDOW_HEIGHT = 1600

DEFAULT_REMINDER_INTERVAL_MINUTES = 15
MAX_REMINDER_INTERVAL_MINUTES = 24 * 60

SNACKBAR_DURATION_MS = 3_000
ERROR_SNACKBAR_DURATION_MS = 5_000

ALL_DELETED_MESSAGE = "All tasks have been deleted"
