# tests/conftest.py

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path

import pytest

from tasktracker.application.task_list_controller import TaskListController
from tasktracker.database import TaskStore
from tasktracker.infrastructure.cache.json_cache import JsonCache
from tasktracker.ui.windows.main_window_state_store import MainWindowStateStore


@pytest.fixture()
def store(tmp_path: Path) -> TaskStore:
    task_store = TaskStore(tmp_path / "data" / "task_db")
    task_store.init_db()
    return task_store


@pytest.fixture()
def controller(qapp, store: TaskStore):
    """
    Controller with the worker in the test thread.

    Every operation completes before the call returns, which keeps the
    assertions free of waits.
    """
    ctrl = TaskListController(store, threaded=False)
    ctrl.load()
    yield ctrl
    ctrl.shutdown()


@pytest.fixture()
def threaded_controller(qapp, qtbot, store: TaskStore):
    ctrl = TaskListController(store, threaded=True)
    with qtbot.waitSignal(ctrl.operation_finished, timeout=3000):
        ctrl.load()
    yield ctrl
    ctrl.shutdown()


@pytest.fixture()
def state_store(tmp_path: Path) -> MainWindowStateStore:
    return MainWindowStateStore(JsonCache(str(tmp_path / "cache")))
