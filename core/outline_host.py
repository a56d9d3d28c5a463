"""
Host side of the outline: tracks the current entry and exposes the clock-in hook.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from PySide6.QtCore import QObject, Signal

from effort_timer_core.effort_timer_core import logger as app_logger
from shared.outline_entry import OutlineEntry

_LOGGER = app_logger.get_logger()


class OutlineHost(QObject):
    """
    Emits ``clockInStarting`` synchronously before an entry's clock starts,
    so connected hooks can read and update the entry first.
    """

    clockInStarting = Signal(object)
    clockedIn = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._current_entry: Optional[OutlineEntry] = None

    @property
    def current_entry(self) -> Optional[OutlineEntry]:
        return self._current_entry

    def clock_in(self, entry: OutlineEntry) -> None:
        _LOGGER.debug("Clocking in to '{}'.", entry.heading)
        self._current_entry = entry
        self.clockInStarting.emit(entry)
        entry.clocked_in_at = datetime.now().astimezone()
        self.clockedIn.emit(entry)
