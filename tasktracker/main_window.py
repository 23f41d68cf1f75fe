"""Main application window for TaskTracker."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, pyqtSlot
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tasktracker.application.reminder_job import REMINDER_WORK_NAME, ReminderJob
from tasktracker.application.task_list_controller import TaskListController
from tasktracker.database import TaskStore
from tasktracker.domain.models import Task
from tasktracker.infrastructure.notifications.tray_notifier import TrayNotifier
from tasktracker.infrastructure.scheduling.periodic_scheduler import ExistingWorkPolicy, PeriodicWorkScheduler
from tasktracker.styles import MAIN_STYLESHEET
from tasktracker.ui.task_list import FilterBar, TaskListWidget
from tasktracker.ui.widgets.snackbar import Snackbar
from tasktracker.ui.windows import (
    ALL_DELETED_MESSAGE,
    ERROR_SNACKBAR_DURATION_MS,
    SNACKBAR_DURATION_MS,
    WINDOW_TITLE,
    MainWindowState,
    MainWindowStateStore,
    TrayCallbacks,
    TrayController,
    create_app_icon,
)

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Task list window with tray residency and the periodic reminder."""

    def __init__(
        self,
        store: TaskStore | None = None,
        *,
        state_store: MainWindowStateStore | None = None,
        threaded: bool = True,
        enable_tray: bool = True,
    ):
        super().__init__()

        self._ui_state_store = state_store or MainWindowStateStore()
        ui_state = self._ui_state_store.load()
        self._reminders_enabled = ui_state.reminders_enabled
        self._reminder_interval_minutes = ui_state.reminder_interval_minutes
        self._quitting = False

        self.setWindowTitle(WINDOW_TITLE)
        self.setWindowIcon(create_app_icon())
        self.setStyleSheet(MAIN_STYLESHEET)
        self.resize(ui_state.window_width, ui_state.window_height)

        container = QWidget(self)
        container.setObjectName("container")
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header_label = QLabel(WINDOW_TITLE)
        self.header_label.setObjectName("headerLabel")
        layout.addWidget(self.header_label)

        self.busy_progress = QProgressBar()
        self.busy_progress.setObjectName("busyProgress")
        self.busy_progress.setTextVisible(False)
        self.busy_progress.setRange(0, 0)
        self.busy_progress.hide()
        layout.addWidget(self.busy_progress)

        self.task_list = TaskListWidget()
        layout.addWidget(self.task_list, 1)

        footer = QWidget()
        footer_layout = QVBoxLayout(footer)
        footer_layout.setContentsMargins(14, 10, 14, 10)

        self.delete_all_button = QPushButton("Delete all tasks")
        self.delete_all_button.setObjectName("deleteAllButton")
        self.delete_all_button.setCursor(Qt.CursorShape.PointingHandCursor)
        footer_layout.addWidget(self.delete_all_button)
        layout.addWidget(footer)

        self.filter_bar = FilterBar()
        layout.addWidget(self.filter_bar)

        self.setCentralWidget(container)
        self.snackbar = Snackbar(container)

        self.controller = TaskListController(store or TaskStore(), threaded=threaded, parent=self)

        # Task list intents -> controller.
        self.task_list.add_requested.connect(self.controller.add_task)
        self.task_list.toggle_requested.connect(self.controller.toggle_task_completion)
        self.task_list.edit_requested.connect(self.controller.update_task_description)
        self.task_list.delete_requested.connect(self.controller.delete_task)
        self.delete_all_button.clicked.connect(self.controller.delete_all_tasks)
        self.filter_bar.filter_selected.connect(self.controller.set_filter)

        # Controller publications -> widgets.
        self.controller.filtered_tasks_changed.connect(self._on_filtered_tasks_changed)
        self.controller.tasks_changed.connect(self.task_list.update_counter)
        self.controller.filter_changed.connect(self.filter_bar.set_current)
        self.controller.all_tasks_deleted.connect(self._on_all_tasks_deleted)
        self.controller.operation_failed.connect(self._on_operation_failed)
        self.controller.busy_changed.connect(self.busy_progress.setVisible)

        self.notifier = TrayNotifier()
        self.reminder_job = ReminderJob(self.notifier)
        self.scheduler = PeriodicWorkScheduler(parent=self)

        self._tray_controller: TrayController | None = None
        if enable_tray and TrayController.is_available():
            self._setup_tray()
        elif enable_tray:
            logger.warning("System tray is not available. Reminders will only be logged.")

        self._apply_reminder_schedule()
        self.controller.load()

    @property
    def reminders_enabled(self) -> bool:
        return self._reminders_enabled

    def closeEvent(self, event):
        if self._tray_controller is not None and not self._quitting:
            # Stay resident in the tray so reminders keep running.
            self.hide()
            event.ignore()
            return

        self._save_ui_state()
        self.scheduler.cancel_all()
        self.controller.shutdown()
        if self._tray_controller is not None:
            self._tray_controller.hide()
        super().closeEvent(event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.snackbar.reposition()

    @pyqtSlot(object)
    def _on_filtered_tasks_changed(self, tasks: list[Task]):
        self.task_list.set_tasks(tasks)

    @pyqtSlot()
    def _on_all_tasks_deleted(self):
        self.snackbar.show_message(ALL_DELETED_MESSAGE, SNACKBAR_DURATION_MS)

    @pyqtSlot(str)
    def _on_operation_failed(self, message: str):
        # Rows may show optimistic checkbox state; redraw from the controller.
        self.task_list.set_tasks(self.controller.filtered_tasks)
        self.snackbar.show_message(message, ERROR_SNACKBAR_DURATION_MS, error=True)

    def set_reminders_enabled(self, enabled: bool):
        if self._reminders_enabled == enabled:
            return
        self._reminders_enabled = enabled
        self._apply_reminder_schedule()
        if self._tray_controller is not None:
            self._tray_controller.set_reminders_enabled(enabled)
        self._save_ui_state()

    def remind_now(self):
        self.reminder_job.run()

    def _apply_reminder_schedule(self):
        if self._reminders_enabled:
            self.scheduler.enqueue_unique_periodic_work(
                REMINDER_WORK_NAME,
                self._reminder_interval_minutes,
                self.reminder_job,
                policy=ExistingWorkPolicy.REPLACE,
            )
        else:
            self.scheduler.cancel_unique_work(REMINDER_WORK_NAME)

    def _setup_tray(self):
        self._tray_controller = TrayController(
            parent=self,
            callbacks=TrayCallbacks(
                toggle_window=self._toggle_window,
                set_reminders_enabled=self.set_reminders_enabled,
                remind_now=self.remind_now,
                quit_app=self._quit_app,
            ),
            reminders_enabled=self._reminders_enabled,
        )
        self.notifier.set_tray_icon(self._tray_controller.tray_icon)
        self._tray_controller.show()

    def _toggle_window(self):
        if self.isVisible():
            self.hide()
            return
        self.show()
        self.raise_()
        self.activateWindow()

    def _save_ui_state(self):
        try:
            self._ui_state_store.save(
                MainWindowState(
                    window_width=self.width(),
                    window_height=self.height(),
                    reminders_enabled=self._reminders_enabled,
                    reminder_interval_minutes=self._reminder_interval_minutes,
                )
            )
        except OSError:
            logger.exception("Failed to save UI state.")

    def _quit_app(self):
        self._quitting = True
        self.close()
        QApplication.quit()
