from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtWidgets import QSystemTrayIcon

logger = logging.getLogger(__name__)

MESSAGE_TIMEOUT_MS = 8_000


class NotificationImportance(str, Enum):
    LOW = "low"
    DEFAULT = "default"
    HIGH = "high"


_MESSAGE_ICONS = {
    NotificationImportance.LOW: QSystemTrayIcon.MessageIcon.NoIcon,
    NotificationImportance.DEFAULT: QSystemTrayIcon.MessageIcon.Information,
    NotificationImportance.HIGH: QSystemTrayIcon.MessageIcon.Warning,
}


@dataclass(frozen=True, slots=True)
class NotificationChannel:
    channel_id: str
    name: str
    importance: NotificationImportance = NotificationImportance.DEFAULT


@dataclass(frozen=True, slots=True)
class Notification:
    notification_id: int
    channel_id: str
    title: str
    text: str


class TrayNotifier:
    """Shows notifications as system tray balloons.

    A notification posted with an id already in use replaces the earlier one.
    """

    def __init__(self, tray_icon: QSystemTrayIcon | None = None):
        self._tray_icon = tray_icon
        self._channels: dict[str, NotificationChannel] = {}
        self._active: dict[int, Notification] = {}

    def set_tray_icon(self, tray_icon: QSystemTrayIcon | None) -> None:
        self._tray_icon = tray_icon

    def create_channel(self, channel: NotificationChannel) -> None:
        if channel.channel_id not in self._channels:
            logger.info("Created notification channel %s.", channel.channel_id)
        self._channels[channel.channel_id] = channel

    def channel(self, channel_id: str) -> NotificationChannel | None:
        return self._channels.get(channel_id)

    def notify(self, notification: Notification) -> None:
        channel = self._channels.get(notification.channel_id)
        if channel is None:
            raise ValueError(f"Unknown notification channel: {notification.channel_id}")

        self._active[notification.notification_id] = notification
        if self._tray_icon is None:
            logger.warning("No tray icon available; notification %d not shown.", notification.notification_id)
            return

        self._tray_icon.showMessage(
            notification.title,
            notification.text,
            _MESSAGE_ICONS[channel.importance],
            MESSAGE_TIMEOUT_MS,
        )

    def active_notifications(self) -> list[Notification]:
        return list(self._active.values())
