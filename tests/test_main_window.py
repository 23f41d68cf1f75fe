# tests/test_main_window.py

from __future__ import annotations

import pytest
from PyQt6.QtCore import Qt

from tasktracker.application.reminder_job import REMINDER_WORK_NAME
from tasktracker.database import TaskStore
from tasktracker.domain.models import TaskFilter
from tasktracker.main_window import MainWindow
from tasktracker.ui.windows.main_window_constants import ALL_DELETED_MESSAGE
from tasktracker.ui.windows.main_window_state_store import MainWindowStateStore

from .fakes import StubTrayController


@pytest.fixture()
def window(qtbot, store: TaskStore, state_store: MainWindowStateStore):
    win = MainWindow(store, state_store=state_store, threaded=False, enable_tray=False)
    qtbot.addWidget(win)
    with qtbot.waitExposed(win):
        win.show()
    yield win
    win.scheduler.cancel_all()
    win.controller.shutdown()


def _add(qtbot, window: MainWindow, text: str) -> None:
    window.task_list.input_field.setText(text)
    qtbot.mouseClick(window.task_list.add_button, Qt.MouseButton.LeftButton)


def test_adding_renders_a_row_and_clears_input(qtbot, window: MainWindow) -> None:
    _add(qtbot, window, "Buy milk")

    assert window.task_list.input_field.text() == ""
    assert window.task_list.rendered_task_ids() == [1]
    assert window.task_list.task_widget(1).title_label.text() == "Buy milk"
    assert window.task_list.counter_label.text().strip() == "0 / 1 completed"


def test_blank_input_does_not_add(qtbot, window: MainWindow) -> None:
    _add(qtbot, window, "   ")
    assert window.controller.tasks == []


def test_checkbox_and_filters(qtbot, window: MainWindow) -> None:
    _add(qtbot, window, "A")
    _add(qtbot, window, "B")

    window.task_list.task_widget(1).checkbox.click()
    assert window.controller.tasks[0].is_completed is True

    qtbot.mouseClick(window.filter_bar.button(TaskFilter.COMPLETED), Qt.MouseButton.LeftButton)
    assert window.task_list.rendered_task_ids() == [1]

    qtbot.mouseClick(window.filter_bar.button(TaskFilter.PENDING), Qt.MouseButton.LeftButton)
    assert window.task_list.rendered_task_ids() == [2]

    qtbot.mouseClick(window.filter_bar.button(TaskFilter.ALL), Qt.MouseButton.LeftButton)
    assert window.task_list.rendered_task_ids() == [1, 2]


def test_inline_edit_saves_new_description(qtbot, window: MainWindow, store: TaskStore) -> None:
    _add(qtbot, window, "Buy milk")

    row = window.task_list.task_widget(1)
    qtbot.mouseClick(row.edit_button, Qt.MouseButton.LeftButton)
    assert window.task_list.editing_task_id == 1

    row.edit_input.setText("Buy oat milk")
    qtbot.mouseClick(row.save_button, Qt.MouseButton.LeftButton)

    assert window.task_list.editing_task_id is None
    assert store.get_all_tasks()[0].description == "Buy oat milk"
    assert window.task_list.task_widget(1).title_label.text() == "Buy oat milk"


def test_editor_survives_a_rerender(qtbot, window: MainWindow) -> None:
    _add(qtbot, window, "A")
    row = window.task_list.task_widget(1)
    qtbot.mouseClick(row.edit_button, Qt.MouseButton.LeftButton)
    row.edit_input.setText("draft")

    _add(qtbot, window, "B")

    rerendered = window.task_list.task_widget(1)
    assert rerendered.is_editing
    assert rerendered.draft() == "draft"


def test_delete_row(qtbot, window: MainWindow) -> None:
    _add(qtbot, window, "A")
    _add(qtbot, window, "B")

    qtbot.mouseClick(window.task_list.task_widget(1).delete_button, Qt.MouseButton.LeftButton)

    assert window.task_list.rendered_task_ids() == [2]


def test_delete_all_shows_snackbar(qtbot, window: MainWindow) -> None:
    _add(qtbot, window, "A")
    _add(qtbot, window, "B")

    qtbot.mouseClick(window.delete_all_button, Qt.MouseButton.LeftButton)

    assert window.task_list.rendered_task_ids() == []
    assert window.snackbar.message() == ALL_DELETED_MESSAGE
    assert not window.snackbar.isHidden()


def test_reminder_is_registered_and_toggleable(window: MainWindow, state_store: MainWindowStateStore) -> None:
    assert window.scheduler.is_scheduled(REMINDER_WORK_NAME)
    assert window.scheduler.interval_minutes(REMINDER_WORK_NAME) == 15

    window.set_reminders_enabled(False)
    assert not window.scheduler.is_scheduled(REMINDER_WORK_NAME)
    assert state_store.load().reminders_enabled is False

    window.set_reminders_enabled(True)
    assert window.scheduler.is_scheduled(REMINDER_WORK_NAME)


def test_remind_now_posts_notification(window: MainWindow) -> None:
    window.remind_now()
    assert [n.notification_id for n in window.notifier.active_notifications()] == [1]


def test_close_with_tray_hides_and_keeps_reminders(window: MainWindow) -> None:
    tray = StubTrayController()
    window._tray_controller = tray

    assert window.close() is False

    assert window.isHidden()
    assert window.scheduler.is_scheduled(REMINDER_WORK_NAME)
    assert window.controller.tasks == []
    assert not tray.hidden
    window._tray_controller = None


def test_quit_drains_writes_saves_state_and_stops_reminders(
    qtbot, store: TaskStore, state_store: MainWindowStateStore
) -> None:
    win = MainWindow(store, state_store=state_store, threaded=True, enable_tray=False)
    qtbot.addWidget(win)
    qtbot.waitUntil(lambda: not win.controller.is_busy, timeout=3000)
    tray = StubTrayController()
    win._tray_controller = tray
    win.resize(500, 700)

    for i in range(50):
        win.controller.add_task(f"t{i}")
    win._quitting = True

    assert win.close() is True

    assert len(store.get_all_tasks()) == 50
    assert not win.controller.is_running
    assert not win.scheduler.is_scheduled(REMINDER_WORK_NAME)
    assert tray.hidden
    saved = state_store.load()
    assert (saved.window_width, saved.window_height) == (500, 700)
    assert saved.reminders_enabled is True
