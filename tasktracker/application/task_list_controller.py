"""In-memory task list and its filtered view, backed by the task worker."""

from __future__ import annotations

import logging
from dataclasses import replace

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from tasktracker.database import TaskStore
from tasktracker.domain.models import Task, TaskFilter, filter_tasks
from tasktracker.task_worker import TaskWorker

logger = logging.getLogger(__name__)

_FAILURE_MESSAGES = {
    "load": "Could not load tasks.",
    "reload": "Could not reload tasks.",
    "add": "Could not add the task.",
    "update": "Could not update the task.",
    "delete": "Could not delete the task.",
    "delete_all": "Could not delete all tasks.",
}


class TaskListController(QObject):
    """Sole owner of ``tasks`` and ``filtered_tasks``.

    Store work is forwarded to a :class:`TaskWorker`. With ``threaded=True``
    the worker runs in its own QThread and every request is queued there;
    otherwise it runs in the caller's thread and each call completes before
    returning.
    """

    tasks_changed = pyqtSignal(object)  # list[Task]
    filtered_tasks_changed = pyqtSignal(object)  # list[Task]
    filter_changed = pyqtSignal(object)  # TaskFilter
    all_tasks_deleted = pyqtSignal()
    operation_failed = pyqtSignal(str)
    operation_finished = pyqtSignal(str)
    busy_changed = pyqtSignal(bool)

    # GUI thread -> worker thread requests.
    _request_initialize = pyqtSignal()
    _request_insert = pyqtSignal(str)
    _request_update = pyqtSignal(object)
    _request_delete = pyqtSignal(object)
    _request_delete_all = pyqtSignal()
    _request_stop = pyqtSignal()

    def __init__(self, store: TaskStore, *, threaded: bool = True, parent: QObject | None = None):
        super().__init__(parent)
        self._tasks: list[Task] = []
        self._filtered_tasks: list[Task] = []
        self._filter = TaskFilter.ALL
        self._in_flight = 0

        self._worker = TaskWorker(store)
        self._thread: QThread | None = None
        if threaded:
            self._thread = QThread(self)
            self._worker.moveToThread(self._thread)
            self._thread.finished.connect(self._worker.deleteLater)

        self._request_initialize.connect(self._worker.initialize)
        self._request_insert.connect(self._worker.insert_task)
        self._request_update.connect(self._worker.update_task)
        self._request_delete.connect(self._worker.delete_task)
        self._request_delete_all.connect(self._worker.delete_all_tasks)
        self._request_stop.connect(self._worker.stop)

        # Worker thread -> GUI thread results.
        self._worker.tasks_loaded.connect(self._on_tasks_loaded)
        self._worker.tasks_cleared.connect(self._on_tasks_cleared)
        self._worker.operation_failed.connect(self._on_operation_failed)
        self._worker.operation_finished.connect(self._on_operation_finished)

        if self._thread is not None:
            self._thread.start()

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def filtered_tasks(self) -> list[Task]:
        return list(self._filtered_tasks)

    @property
    def current_filter(self) -> TaskFilter:
        return self._filter

    @property
    def is_busy(self) -> bool:
        return self._in_flight > 0

    @property
    def is_running(self) -> bool:
        """True while a worker thread is attached and not yet shut down."""
        return self._thread is not None and self._thread.isRunning()

    def load(self):
        self._dispatch(self._request_initialize)

    def add_task(self, description: str):
        if not description or not description.strip():
            logger.debug("Ignoring add request with an empty description.")
            return
        self._dispatch(self._request_insert, description)

    def toggle_task_completion(self, task: Task):
        self._dispatch(self._request_update, replace(task, is_completed=not task.is_completed))

    def update_task_description(self, task: Task, new_description: str):
        if not new_description or not new_description.strip():
            logger.debug("Ignoring edit of task %s with an empty description.", task.id)
            return
        self._dispatch(self._request_update, replace(task, description=new_description))

    def delete_task(self, task: Task):
        self._dispatch(self._request_delete, task)

    def delete_all_tasks(self):
        self._dispatch(self._request_delete_all)

    def show_all_tasks(self):
        self.set_filter(TaskFilter.ALL)

    def show_completed_tasks(self):
        self.set_filter(TaskFilter.COMPLETED)

    def show_pending_tasks(self):
        self.set_filter(TaskFilter.PENDING)

    def set_filter(self, task_filter: TaskFilter):
        if task_filter != self._filter:
            self._filter = task_filter
            self.filter_changed.emit(task_filter)
        self._apply_filter()

    def shutdown(self, timeout_ms: int = 1500):
        """Stop the worker thread after every request issued so far has run."""
        if self._thread is None:
            return
        self._request_stop.emit()
        if not self._thread.wait(timeout_ms):
            logger.warning("Task worker still writing after %d ms; waiting for it to drain.", timeout_ms)
            self._thread.wait()
        self._thread = None

    def _dispatch(self, signal, *args):
        self._in_flight += 1
        if self._in_flight == 1:
            self.busy_changed.emit(True)
        signal.emit(*args)

    def _apply_filter(self):
        self._filtered_tasks = filter_tasks(self._tasks, self._filter)
        self.filtered_tasks_changed.emit(self.filtered_tasks)

    @pyqtSlot(object)
    def _on_tasks_loaded(self, tasks: list[Task]):
        self._tasks = list(tasks)
        self.tasks_changed.emit(self.tasks)
        self._apply_filter()

    @pyqtSlot()
    def _on_tasks_cleared(self):
        self._tasks = []
        self._filtered_tasks = []
        self.tasks_changed.emit([])
        self.filtered_tasks_changed.emit([])
        self.all_tasks_deleted.emit()

    @pyqtSlot(str, str)
    def _on_operation_failed(self, operation: str, message: str):
        logger.error("Task operation %s failed: %s", operation, message)
        self.operation_failed.emit(_FAILURE_MESSAGES.get(operation, "Task operation failed."))

    @pyqtSlot(str)
    def _on_operation_finished(self, operation: str):
        self._in_flight = max(0, self._in_flight - 1)
        self.operation_finished.emit(operation)
        if self._in_flight == 0:
            self.busy_changed.emit(False)
