"""Task list UI components."""

from tasktracker.ui.task_list.filter_bar import FilterBar
from tasktracker.ui.task_list.task_item_widget import TaskItemWidget
from tasktracker.ui.task_list.task_list_widget import TaskListWidget

__all__ = [
    "FilterBar",
    "TaskItemWidget",
    "TaskListWidget",
]
