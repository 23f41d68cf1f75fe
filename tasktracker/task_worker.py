"""Background worker that owns every task database call."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from tasktracker.database import TaskStore
from tasktracker.domain.errors import NotFoundError, StorageError
from tasktracker.domain.models import Task

logger = logging.getLogger(__name__)


class TaskWorker(QObject):
    """Worker object living in a QThread; requests arrive as queued signals.

    The thread's event loop runs one slot at a time, so store mutations and
    the reloads that follow them are serialized in request order.
    """

    tasks_loaded = pyqtSignal(object)  # list[Task]
    tasks_cleared = pyqtSignal()
    operation_failed = pyqtSignal(str, str)  # operation, message
    operation_finished = pyqtSignal(str)

    def __init__(self, store: TaskStore):
        super().__init__()
        self._store = store

    @pyqtSlot()
    def initialize(self):
        self._run("load", self._store.init_db)

    @pyqtSlot()
    def load_tasks(self):
        self._run("reload", lambda: None)

    @pyqtSlot(str)
    def insert_task(self, description: str):
        self._run("add", lambda: self._store.insert_task(description))

    @pyqtSlot(object)
    def update_task(self, task: Task):
        self._run("update", lambda: self._store.update_task(task))

    @pyqtSlot(object)
    def delete_task(self, task: Task):
        self._run("delete", lambda: self._store.delete_task(task))

    @pyqtSlot()
    def delete_all_tasks(self):
        try:
            self._store.delete_all_tasks()
        except StorageError as exc:
            logger.exception("Failed to delete all tasks.")
            self.operation_failed.emit("delete_all", str(exc))
        else:
            self.tasks_cleared.emit()
        finally:
            self.operation_finished.emit("delete_all")

    @pyqtSlot()
    def stop(self):
        """Queued behind every pending request; ends the worker thread."""
        QThread.currentThread().quit()

    def _run(self, operation: str, action: Callable[[], object]):
        """Apply ``action`` then publish the full table."""
        try:
            action()
            tasks = self._store.get_all_tasks()
        except NotFoundError as exc:
            logger.warning("Task %s disappeared before %s.", exc.task_id, operation)
            self.operation_failed.emit(operation, str(exc))
        except StorageError as exc:
            logger.exception("Task %s failed.", operation)
            self.operation_failed.emit(operation, str(exc))
        else:
            self.tasks_loaded.emit(tasks)
        finally:
            self.operation_finished.emit(operation)
