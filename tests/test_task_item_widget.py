# tests/test_task_item_widget.py

from __future__ import annotations

from tasktracker.domain.models import Task
from tasktracker.ui.task_list.task_item_widget import TaskItemWidget


def test_checkbox_locks_until_the_row_is_rebuilt(qtbot) -> None:
    row = TaskItemWidget(Task(id=1, description="Buy milk"))
    qtbot.addWidget(row)
    toggled: list[Task] = []
    row.toggled.connect(toggled.append)

    row.checkbox.click()
    row.checkbox.click()

    assert toggled == [Task(id=1, description="Buy milk")]
    assert not row.checkbox.isEnabled()


def test_fresh_row_has_an_enabled_checkbox(qtbot) -> None:
    row = TaskItemWidget(Task(id=1, description="Buy milk", is_completed=True))
    qtbot.addWidget(row)

    assert row.checkbox.isEnabled()
    assert row.checkbox.isChecked()
