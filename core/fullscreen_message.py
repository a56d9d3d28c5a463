"""
Full-screen fallback display that types the completion message out.
"""

from __future__ import annotations

import random

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QKeyEvent, QMouseEvent
from PySide6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from effort_timer_core.effort_timer_core import logger as app_logger

_LOGGER = app_logger.get_logger()

# Per-character delay range for the typing animation, in milliseconds.
_MIN_CHAR_DELAY_MS = 30
_MAX_CHAR_DELAY_MS = 140


class FullScreenMessage(QWidget):
    """
    Covers the primary screen with a dark backdrop and reveals the message one
    character at a time. Dismissed by a click, Escape, or the auto-close timer.
    """

    dismissed = Signal()

    def __init__(self, display_seconds: int = 15, parent: QWidget | None = None) -> None:
        flags = Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint
        super().__init__(parent)
        self.setWindowFlags(flags)
        self.setObjectName("FullScreenMessage")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setWindowOpacity(0.92)
        self.display_seconds = display_seconds

        self._title_label = QLabel()
        self._title_label.setObjectName("FullScreenTitle")
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._message_label = QLabel()
        self._message_label.setObjectName("FullScreenText")
        self._message_label.setWordWrap(True)
        self._message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._hint_label = QLabel("Click or press Esc to dismiss")
        self._hint_label.setObjectName("FullScreenHint")
        self._hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(80, 80, 80, 80)
        layout.addStretch()
        layout.addWidget(self._title_label)
        layout.addSpacing(24)
        layout.addWidget(self._message_label)
        layout.addStretch()
        layout.addWidget(self._hint_label)

        self.setStyleSheet(
            """
            QWidget#FullScreenMessage {
                background-color: #0b1020;
            }
            QLabel#FullScreenTitle {
                color: rgba(255, 255, 255, 0.70);
                font-size: 22px;
                letter-spacing: 2px;
            }
            QLabel#FullScreenText {
                color: white;
                font-size: 48px;
                font-weight: 600;
            }
            QLabel#FullScreenHint {
                color: rgba(255, 255, 255, 0.45);
                font-size: 13px;
            }
            """
        )

        self._full_text = ""
        self._shown_chars = 0
        self._type_timer = QTimer(self)
        self._type_timer.setSingleShot(True)
        self._type_timer.timeout.connect(self._type_next_char)  # type: ignore[arg-type]
        self._close_timer = QTimer(self)
        self._close_timer.setSingleShot(True)
        self._close_timer.timeout.connect(self.dismiss)  # type: ignore[arg-type]

    @property
    def displayed_text(self) -> str:
        return self._message_label.text()

    def notify(self, title: str, message: str) -> None:
        """Show ``message`` full screen; satisfies the notifier interface."""
        _LOGGER.info("Showing full-screen message: {}", message)
        self._title_label.setText(title)
        self._full_text = message
        self._shown_chars = 0
        self._message_label.clear()
        self._cover_primary_screen()
        self.showFullScreen()
        self.raise_()
        self.activateWindow()
        self._type_next_char()
        self._close_timer.start(max(1, self.display_seconds) * 1000)

    def dismiss(self) -> None:
        if not self.isVisible():
            return
        self._type_timer.stop()
        self._close_timer.stop()
        self.hide()
        self.dismissed.emit()

    def _type_next_char(self) -> None:
        if self._shown_chars >= len(self._full_text):
            return
        self._shown_chars += 1
        self._message_label.setText(self._full_text[: self._shown_chars])
        if self._shown_chars < len(self._full_text):
            self._type_timer.start(random.randint(_MIN_CHAR_DELAY_MS, _MAX_CHAR_DELAY_MS))

    def _cover_primary_screen(self) -> None:
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        self.setGeometry(screen.geometry())

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        super().mousePressEvent(event)
        if event.button() == Qt.MouseButton.LeftButton:
            self.dismiss()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        if event.key() == Qt.Key.Key_Escape:
            self.dismiss()
            return
        super().keyPressEvent(event)
