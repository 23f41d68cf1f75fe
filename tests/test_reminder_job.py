# tests/test_reminder_job.py

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QSystemTrayIcon

from tasktracker.application.reminder_job import (
    REMINDER_CHANNEL_ID,
    REMINDER_NOTIFICATION_ID,
    REMINDER_TEXT,
    REMINDER_TITLE,
    JobResult,
    ReminderJob,
)
from tasktracker.infrastructure.notifications.tray_notifier import (
    Notification,
    NotificationChannel,
    NotificationImportance,
    TrayNotifier,
)

from .fakes import FakeTrayIcon


def test_run_posts_the_fixed_reminder() -> None:
    tray = FakeTrayIcon()
    notifier = TrayNotifier(tray)

    assert ReminderJob(notifier).run() == JobResult.SUCCESS

    channel = notifier.channel(REMINDER_CHANNEL_ID)
    assert channel is not None
    assert channel.importance == NotificationImportance.DEFAULT
    assert notifier.active_notifications() == [
        Notification(
            notification_id=REMINDER_NOTIFICATION_ID,
            channel_id=REMINDER_CHANNEL_ID,
            title=REMINDER_TITLE,
            text=REMINDER_TEXT,
        )
    ]
    assert [(m.title, m.text) for m in tray.shown] == [(REMINDER_TITLE, REMINDER_TEXT)]
    assert tray.shown[0].icon == QSystemTrayIcon.MessageIcon.Information


def test_repeated_runs_overwrite_notification_one() -> None:
    tray = FakeTrayIcon()
    notifier = TrayNotifier(tray)
    job = ReminderJob(notifier)

    job()
    job()
    job()

    assert len(notifier.active_notifications()) == 1
    assert notifier.active_notifications()[0].notification_id == 1
    assert len(tray.shown) == 3


def test_run_without_tray_still_succeeds() -> None:
    notifier = TrayNotifier(None)
    assert ReminderJob(notifier).run() == JobResult.SUCCESS
    assert len(notifier.active_notifications()) == 1


def test_notify_failure_is_reported_not_raised() -> None:
    class BrokenTray:
        def showMessage(self, *args):  # noqa: N802 - Qt naming
            raise RuntimeError("tray went away")

    assert ReminderJob(TrayNotifier(BrokenTray())).run() == JobResult.FAILURE


def test_notify_requires_a_known_channel() -> None:
    notifier = TrayNotifier(FakeTrayIcon())
    with pytest.raises(ValueError):
        notifier.notify(Notification(notification_id=1, channel_id="missing", title="t", text="x"))


def test_channel_importance_selects_the_balloon_icon() -> None:
    tray = FakeTrayIcon()
    notifier = TrayNotifier(tray)
    notifier.create_channel(NotificationChannel("urgent", "Urgent", NotificationImportance.HIGH))

    notifier.notify(Notification(notification_id=5, channel_id="urgent", title="t", text="x"))

    assert tray.shown[0].icon == QSystemTrayIcon.MessageIcon.Warning
