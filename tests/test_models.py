# tests/test_models.py

from __future__ import annotations

import dataclasses

import pytest

from tasktracker.domain.models import Task, TaskFilter, filter_tasks

TASKS = [
    Task(id=1, description="Buy milk", is_completed=True),
    Task(id=2, description="Call mom"),
    Task(id=3, description="Pay rent", is_completed=True),
    Task(id=4, description="Water plants"),
]


def test_all_keeps_every_task_in_order() -> None:
    assert filter_tasks(TASKS, TaskFilter.ALL) == TASKS


def test_completed_and_pending_partition_the_list() -> None:
    completed = filter_tasks(TASKS, TaskFilter.COMPLETED)
    pending = filter_tasks(TASKS, TaskFilter.PENDING)

    assert [t.id for t in completed] == [1, 3]
    assert [t.id for t in pending] == [2, 4]
    assert all(t.is_completed for t in completed)
    assert not any(t.is_completed for t in pending)
    assert sorted(completed + pending, key=lambda t: t.id) == TASKS


def test_filter_returns_a_new_list() -> None:
    view = filter_tasks(TASKS, TaskFilter.ALL)
    view.clear()
    assert len(TASKS) == 4


def test_task_defaults_to_pending_and_is_immutable() -> None:
    task = Task(id=7, description="Read")
    assert task.is_completed is False

    with pytest.raises(dataclasses.FrozenInstanceError):
        task.id = 8  # type: ignore[misc]
