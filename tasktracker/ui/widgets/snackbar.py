from __future__ import annotations

from PyQt6.QtCore import QTimer, Qt, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from tasktracker.styles import BG_TERTIARY, DANGER, TEXT_PRIMARY


class Snackbar(QWidget):
    """Transient message bar pinned to the bottom of its parent."""

    dismissed = pyqtSignal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("snackbar")
        self.setVisible(False)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self._apply_style(error=False)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 10)

        self.message_label = QLabel("")
        self.message_label.setObjectName("snackbarMessage")
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self.dismiss)

    def show_message(self, message: str, duration_ms: int, *, error: bool = False) -> None:
        self._apply_style(error=error)
        self.message_label.setText(message)
        self.reposition()
        self.setVisible(True)
        self.raise_()
        self._hide_timer.start(duration_ms)

    def message(self) -> str:
        return self.message_label.text()

    def dismiss(self) -> None:
        self._hide_timer.stop()
        if not self.isHidden():
            self.setVisible(False)
            self.dismissed.emit()

    def reposition(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        margin = 12
        height = self.sizeHint().height()
        self.setGeometry(margin, parent.height() - height - margin, parent.width() - 2 * margin, height)

    def _apply_style(self, *, error: bool) -> None:
        accent = DANGER if error else BG_TERTIARY
        self.setStyleSheet(
            f"""
            QWidget#snackbar {{
                background-color: {BG_TERTIARY};
                border-left: 4px solid {accent};
                border-radius: 8px;
            }}
            QLabel#snackbarMessage {{
                background: transparent;
                color: {TEXT_PRIMARY};
                font-size: 12px;
            }}
            """
        )
