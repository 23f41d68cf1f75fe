"""Persistent UI state and preferences for MainWindow."""

from __future__ import annotations

from dataclasses import dataclass

from tasktracker.infrastructure.cache.json_cache import JsonCache
from tasktracker.infrastructure.scheduling.periodic_scheduler import MIN_PERIODIC_INTERVAL_MINUTES
from tasktracker.ui.windows.main_window_constants import (
    DEFAULT_REMINDER_INTERVAL_MINUTES,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MAX_REMINDER_INTERVAL_MINUTES,
    MAX_WINDOW_HEIGHT,
    MAX_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
)


@dataclass(slots=True)
class MainWindowState:
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    reminders_enabled: bool = True
    reminder_interval_minutes: int = DEFAULT_REMINDER_INTERVAL_MINUTES


def _clamped_int(value: object, default: int, low: int, high: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = default
    return max(low, min(high, number))


class MainWindowStateStore:
    """Load/save window size and reminder preferences via JSON cache."""

    def __init__(self, cache: JsonCache | None = None):
        self._cache = cache or JsonCache()

    def load(self) -> MainWindowState:
        wrapper = self._cache.load("ui_state")
        if not isinstance(wrapper, dict):
            return MainWindowState()

        payload = wrapper.get("payload")
        if not isinstance(payload, dict):
            return MainWindowState()

        return MainWindowState(
            window_width=_clamped_int(
                payload.get("window_width"), DEFAULT_WINDOW_WIDTH, MIN_WINDOW_WIDTH, MAX_WINDOW_WIDTH
            ),
            window_height=_clamped_int(
                payload.get("window_height"), DEFAULT_WINDOW_HEIGHT, MIN_WINDOW_HEIGHT, MAX_WINDOW_HEIGHT
            ),
            reminders_enabled=bool(payload.get("reminders_enabled", True)),
            reminder_interval_minutes=_clamped_int(
                payload.get("reminder_interval_minutes"),
                DEFAULT_REMINDER_INTERVAL_MINUTES,
                int(MIN_PERIODIC_INTERVAL_MINUTES),
                MAX_REMINDER_INTERVAL_MINUTES,
            ),
        )

    def save(self, state: MainWindowState) -> None:
        self._cache.save(
            "ui_state",
            {
                "window_width": _clamped_int(
                    state.window_width, DEFAULT_WINDOW_WIDTH, MIN_WINDOW_WIDTH, MAX_WINDOW_WIDTH
                ),
                "window_height": _clamped_int(
                    state.window_height, DEFAULT_WINDOW_HEIGHT, MIN_WINDOW_HEIGHT, MAX_WINDOW_HEIGHT
                ),
                "reminders_enabled": bool(state.reminders_enabled),
                "reminder_interval_minutes": _clamped_int(
                    state.reminder_interval_minutes,
                    DEFAULT_REMINDER_INTERVAL_MINUTES,
                    int(MIN_PERIODIC_INTERVAL_MINUTES),
                    MAX_REMINDER_INTERVAL_MINUTES,
                ),
            },
        )
