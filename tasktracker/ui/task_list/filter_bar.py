"""Bottom navigation bar selecting the task filter."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QButtonGroup, QHBoxLayout, QPushButton, QWidget

from tasktracker.domain.models import TaskFilter

_FILTER_LABELS = (
    (TaskFilter.ALL, "All", "All tasks"),
    (TaskFilter.COMPLETED, "Completed", "Completed tasks"),
    (TaskFilter.PENDING, "Pending", "Pending tasks"),
)


class FilterBar(QWidget):
    filter_selected = pyqtSignal(object)  # TaskFilter

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("filterBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 6, 14, 6)
        layout.setSpacing(6)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: dict[TaskFilter, QPushButton] = {}

        for task_filter, label, tooltip in _FILTER_LABELS:
            button = QPushButton(label)
            button.setObjectName("filterButton")
            button.setCheckable(True)
            button.setToolTip(tooltip)
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.clicked.connect(lambda _checked, f=task_filter: self.filter_selected.emit(f))
            self._group.addButton(button)
            self._buttons[task_filter] = button
            layout.addWidget(button, 1)

        self.set_current(TaskFilter.ALL)

    def button(self, task_filter: TaskFilter) -> QPushButton:
        return self._buttons[task_filter]

    def set_current(self, task_filter: TaskFilter):
        self._buttons[task_filter].setChecked(True)

    def current(self) -> TaskFilter:
        for task_filter, button in self._buttons.items():
            if button.isChecked():
                return task_filter
        return TaskFilter.ALL
