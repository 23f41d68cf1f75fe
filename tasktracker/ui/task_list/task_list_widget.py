"""Task list pane with add/edit/delete interactions."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from tasktracker.domain.models import Task
from tasktracker.ui.task_list.task_item_widget import TaskItemWidget


class TaskListWidget(QWidget):
    """Add input, counter and the rendered (already filtered) task rows.

    The widget never changes tasks itself; every intent is emitted and the
    rows are rebuilt when the controller publishes a new view.
    """

    add_requested = pyqtSignal(str)
    toggle_requested = pyqtSignal(object)  # Task
    edit_requested = pyqtSignal(object, str)  # Task, new description
    delete_requested = pyqtSignal(object)  # Task

    def __init__(self, parent=None):
        super().__init__(parent)
        self._task_widgets: dict[int, TaskItemWidget] = {}
        self._editing_task_id: int | None = None

        self.setObjectName("taskListRoot")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 0)
        layout.setSpacing(0)

        input_container = QWidget()
        input_layout = QHBoxLayout(input_container)
        input_layout.setContentsMargins(0, 0, 0, 0)
        input_layout.setSpacing(6)

        self.input_field = QLineEdit()
        self.input_field.setObjectName("taskInput")
        self.input_field.setPlaceholderText("New task")
        self.input_field.returnPressed.connect(self._add_task)
        input_layout.addWidget(self.input_field)

        self.add_button = QPushButton("Add")
        self.add_button.setObjectName("addButton")
        self.add_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.add_button.setToolTip("Add task")
        self.add_button.clicked.connect(self._add_task)
        input_layout.addWidget(self.add_button)

        layout.addWidget(input_container)
        layout.addSpacing(10)

        self.counter_label = QLabel()
        self.counter_label.setObjectName("counterLabel")
        layout.addWidget(self.counter_label)
        layout.addSpacing(4)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.task_container = QWidget()
        self.task_layout = QVBoxLayout(self.task_container)
        self.task_layout.setContentsMargins(0, 0, 0, 0)
        self.task_layout.setSpacing(6)
        self.task_layout.addStretch()

        self.scroll_area.setWidget(self.task_container)
        layout.addWidget(self.scroll_area)

        self._empty_label = QLabel("No tasks")
        self._empty_label.setObjectName("emptyLabel")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.task_layout.insertWidget(0, self._empty_label)

    @property
    def editing_task_id(self) -> int | None:
        return self._editing_task_id

    def task_widget(self, task_id: int) -> TaskItemWidget | None:
        return self._task_widgets.get(task_id)

    def rendered_task_ids(self) -> list[int]:
        return list(self._task_widgets)

    def set_tasks(self, tasks: list[Task]):
        drafts = {task_id: widget.draft() for task_id, widget in self._task_widgets.items() if widget.is_editing}
        self._clear_all()

        for task in tasks:
            editing = task.id == self._editing_task_id
            widget = self._create_widget(task, editing=editing, draft=drafts.get(task.id))
            self.task_layout.insertWidget(self.task_layout.count() - 1, widget)
            self._task_widgets[task.id] = widget

        self._empty_label.setVisible(not self._task_widgets)

    def update_counter(self, tasks: list[Task]):
        total = len(tasks)
        done = sum(1 for task in tasks if task.is_completed)
        self.counter_label.setText(f"  {done} / {total} completed" if total else "")

    def _add_task(self):
        description = self.input_field.text().strip()
        if not description:
            return
        self.input_field.clear()
        self.add_requested.emit(description)

    def _on_edit_started(self, task_id: int):
        previous = self._editing_task_id
        self._editing_task_id = task_id
        if previous is not None and previous != task_id and previous in self._task_widgets:
            # Only one row is edited at a time.
            self._close_editor(self._task_widgets[previous])

    def _on_edit_saved(self, task: Task, new_description: str):
        description = new_description.strip()
        if not description:
            return
        self._editing_task_id = None
        self.edit_requested.emit(task, description)

    def _on_delete_clicked(self, task: Task):
        if self._editing_task_id == task.id:
            self._editing_task_id = None
        self.delete_requested.emit(task)

    def _create_widget(self, task: Task, *, editing: bool = False, draft: str | None = None) -> TaskItemWidget:
        widget = TaskItemWidget(task, editing=editing, draft=draft)
        widget.toggled.connect(self.toggle_requested.emit)
        widget.edit_started.connect(self._on_edit_started)
        widget.edit_saved.connect(self._on_edit_saved)
        widget.delete_clicked.connect(self._on_delete_clicked)
        return widget

    def _close_editor(self, old: TaskItemWidget):
        new = self._create_widget(old.task)
        index = self.task_layout.indexOf(old)
        self.task_layout.removeWidget(old)
        old.deleteLater()
        self.task_layout.insertWidget(index, new)
        self._task_widgets[new.task.id] = new

    def _clear_all(self):
        for widget in self._task_widgets.values():
            self.task_layout.removeWidget(widget)
            widget.deleteLater()
        self._task_widgets.clear()
