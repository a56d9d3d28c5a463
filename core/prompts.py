"""
Modal user prompts used by the timer and the effort gate.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from PySide6.QtWidgets import QInputDialog, QMessageBox, QWidget


class UserPrompter(Protocol):
    def confirm(self, question: str) -> bool:
        ...

    def choose(self, prompt: str, choices: Sequence[str]) -> str:
        """Return the picked or typed answer, or an empty string if cancelled."""
        ...


class QtPrompter:
    """Blocking Qt dialogs; runs a nested event loop while open."""

    def __init__(self, parent: QWidget | None = None, title: str = "Effort Timer") -> None:
        self._parent = parent
        self._title = title

    def confirm(self, question: str) -> bool:
        answer = QMessageBox.question(
            self._parent,
            self._title,
            question,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    def choose(self, prompt: str, choices: Sequence[str]) -> str:
        text, accepted = QInputDialog.getItem(
            self._parent,
            self._title,
            prompt,
            list(choices),
            0,
            True,
        )
        if not accepted:
            return ""
        return text
