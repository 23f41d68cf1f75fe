"""System tray controller for MainWindow."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QBrush, QColor, QIcon, QPainter, QPen, QPixmap
from PyQt6.QtWidgets import QMenu, QSystemTrayIcon, QWidget

from tasktracker.styles import ACCENT, BG_TERTIARY, BORDER, TEXT_PRIMARY


@dataclass(slots=True)
class TrayCallbacks:
    toggle_window: Callable[[], None]
    set_reminders_enabled: Callable[[bool], None]
    remind_now: Callable[[], None]
    quit_app: Callable[[], None]


class TrayController:
    """Owns the tray icon, its menu, and the icon used for reminder balloons."""

    def __init__(self, parent: QWidget, callbacks: TrayCallbacks, *, reminders_enabled: bool):
        self._callbacks = callbacks
        self._tray_icon = QSystemTrayIcon(parent)
        self._tray_icon.setIcon(create_app_icon())
        self._tray_icon.setToolTip("TaskTracker")
        self._tray_icon.activated.connect(self._on_activated)

        menu = QMenu(parent)
        menu.setStyleSheet(
            f"""
            QMenu {{
                background-color: {BG_TERTIARY};
                color: {TEXT_PRIMARY};
                border: 1px solid {BORDER};
                border-radius: 8px;
                padding: 6px 2px;
            }}
            QMenu::item {{
                padding: 8px 24px 8px 16px;
                border-radius: 4px;
                margin: 1px 4px;
            }}
            QMenu::item:selected {{
                background-color: rgba(139, 92, 246, 0.2);
                color: {ACCENT};
            }}
            """
        )

        toggle_action = QAction("Show / Hide", parent)
        toggle_action.triggered.connect(self._callbacks.toggle_window)
        menu.addAction(toggle_action)
        menu.addSeparator()

        self._reminders_action = QAction("Reminders", parent)
        self._reminders_action.setCheckable(True)
        self._reminders_action.setChecked(reminders_enabled)
        self._reminders_action.toggled.connect(self._callbacks.set_reminders_enabled)
        menu.addAction(self._reminders_action)

        remind_action = QAction("Remind me now", parent)
        remind_action.triggered.connect(self._callbacks.remind_now)
        menu.addAction(remind_action)

        menu.addSeparator()
        quit_action = QAction("Quit", parent)
        quit_action.triggered.connect(self._callbacks.quit_app)
        menu.addAction(quit_action)

        self._menu = menu
        self._tray_icon.setContextMenu(menu)

    @staticmethod
    def is_available() -> bool:
        return QSystemTrayIcon.isSystemTrayAvailable()

    @property
    def tray_icon(self) -> QSystemTrayIcon:
        return self._tray_icon

    def show(self) -> None:
        self._tray_icon.show()

    def hide(self) -> None:
        self._tray_icon.hide()

    def set_reminders_enabled(self, enabled: bool) -> None:
        self._reminders_action.blockSignals(True)
        self._reminders_action.setChecked(enabled)
        self._reminders_action.blockSignals(False)

    def _on_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self._callbacks.toggle_window()


def create_app_icon() -> QIcon:
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(QColor(0, 0, 0, 0))

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setBrush(QBrush(QColor("#bbc6fb")))
    painter.setPen(Qt.PenStyle.NoPen)
    painter.drawRoundedRect(4, 4, size - 8, size - 8, 14, 14)

    pen = QPen(QColor("#1e1e33"))
    pen.setWidth(5)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    painter.setPen(pen)
    painter.drawLine(18, 33, 28, 43)
    painter.drawLine(28, 43, 46, 22)
    painter.end()

    return QIcon(pixmap)
