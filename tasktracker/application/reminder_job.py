from __future__ import annotations

import logging
from enum import Enum

from tasktracker.infrastructure.notifications.tray_notifier import (
    Notification,
    NotificationChannel,
    NotificationImportance,
    TrayNotifier,
)

logger = logging.getLogger(__name__)

REMINDER_WORK_NAME = "task_reminder_work"
REMINDER_CHANNEL_ID = "task_reminder_channel"
REMINDER_CHANNEL_NAME = "Task Reminder"
REMINDER_NOTIFICATION_ID = 1
REMINDER_TITLE = "Task Reminder"
REMINDER_TEXT = "Don't forget to complete your pending tasks."


class JobResult(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class ReminderJob:
    """Posts the fixed reminder notification. Holds no task state."""

    def __init__(self, notifier: TrayNotifier):
        self.notifier = notifier

    def __call__(self) -> JobResult:
        return self.run()

    def run(self) -> JobResult:
        logger.info("Starting reminder work")
        try:
            self._show_notification()
        except Exception:
            logger.exception("Failed to show the reminder notification.")
            return JobResult.FAILURE
        return JobResult.SUCCESS

    def _show_notification(self) -> None:
        self.notifier.create_channel(
            NotificationChannel(
                channel_id=REMINDER_CHANNEL_ID,
                name=REMINDER_CHANNEL_NAME,
                importance=NotificationImportance.DEFAULT,
            )
        )
        self.notifier.notify(
            Notification(
                notification_id=REMINDER_NOTIFICATION_ID,
                channel_id=REMINDER_CHANNEL_ID,
                title=REMINDER_TITLE,
                text=REMINDER_TEXT,
            )
        )
