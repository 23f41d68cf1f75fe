"""Single task row widget."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QStackedWidget,
    QWidget,
)

from tasktracker.domain.models import Task


class TaskItemWidget(QFrame):
    """Task row: description, completion checkbox, edit and delete buttons.

    Editing swaps the row for an inline line edit with a Save button.
    """

    toggled = pyqtSignal(object)  # Task
    edit_started = pyqtSignal(int)
    edit_saved = pyqtSignal(object, str)  # Task, new description
    delete_clicked = pyqtSignal(object)  # Task

    def __init__(self, task: Task, *, editing: bool = False, draft: str | None = None, parent=None):
        super().__init__(parent)
        self.task = task

        self.setObjectName("taskItem")
        self.setMinimumHeight(46)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 8, 6)
        layout.setSpacing(0)

        self._stack = QStackedWidget()
        layout.addWidget(self._stack)

        display = QWidget()
        display_layout = QHBoxLayout(display)
        display_layout.setContentsMargins(0, 0, 0, 0)
        display_layout.setSpacing(8)

        self.title_label = QLabel(task.description)
        self.title_label.setObjectName("taskTitleDone" if task.is_completed else "taskTitle")
        self.title_label.setWordWrap(True)
        self.title_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        display_layout.addWidget(self.title_label, 1)

        self.checkbox = QCheckBox()
        self.checkbox.setChecked(task.is_completed)
        self.checkbox.setCursor(Qt.CursorShape.PointingHandCursor)
        self.checkbox.setToolTip("Mark as done")
        self.checkbox.clicked.connect(self._toggle)
        display_layout.addWidget(self.checkbox)

        self.edit_button = QPushButton("Edit")
        self.edit_button.setObjectName("iconButton")
        self.edit_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.edit_button.clicked.connect(self.start_editing)
        display_layout.addWidget(self.edit_button)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setObjectName("iconButton")
        self.delete_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_button.clicked.connect(lambda: self.delete_clicked.emit(self.task))
        display_layout.addWidget(self.delete_button)

        editor = QWidget()
        editor_layout = QHBoxLayout(editor)
        editor_layout.setContentsMargins(0, 0, 0, 0)
        editor_layout.setSpacing(6)

        self.edit_input = QLineEdit()
        self.edit_input.setObjectName("taskEditInput")
        self.edit_input.setPlaceholderText("Edit task")
        self.edit_input.returnPressed.connect(self._save)
        editor_layout.addWidget(self.edit_input, 1)

        self.save_button = QPushButton("Save")
        self.save_button.setObjectName("saveButton")
        self.save_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.save_button.clicked.connect(self._save)
        editor_layout.addWidget(self.save_button)

        self._stack.addWidget(display)
        self._stack.addWidget(editor)

        if editing:
            self._show_editor(task.description if draft is None else draft)

    @property
    def is_editing(self) -> bool:
        return self._stack.currentIndex() == 1

    def draft(self) -> str:
        return self.edit_input.text()

    def start_editing(self):
        self._show_editor(self.task.description)
        self.edit_started.emit(self.task.id)

    def _show_editor(self, text: str):
        self.edit_input.setText(text)
        self._stack.setCurrentIndex(1)
        self.edit_input.setFocus()

    def _toggle(self):
        # self.task is stale until the list re-renders with the stored row.
        self.checkbox.setEnabled(False)
        self.toggled.emit(self.task)

    def _save(self):
        self.edit_saved.emit(self.task, self.edit_input.text())
