from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class TaskFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    is_completed: bool = False


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter) -> list[Task]:
    """Return the subset of ``tasks`` selected by ``task_filter``, keeping order."""
    if task_filter == TaskFilter.COMPLETED:
        return [task for task in tasks if task.is_completed]
    if task_filter == TaskFilter.PENDING:
        return [task for task in tasks if not task.is_completed]
    return list(tasks)
