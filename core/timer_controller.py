"""
Single rest timer: arm, replace, cancel, query and fire.
"""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from core.notifier import APP_TITLE, NotificationUnavailable, Notifier
from core.prompts import UserPrompter
from core.scheduler import ScheduledCall, Scheduler
from core.settings import TimerSettings
from effort_timer_core.effort_timer_core import logger as app_logger

NO_TIMER_MESSAGE = "No timer active"


class TimerState(Enum):
    IDLE = "Idle"
    ARMED = "Armed"


def format_remaining(left: timedelta) -> str:
    total_seconds = max(0, round(left.total_seconds()))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes} minutes and {seconds} seconds left"


class TimerController(QObject):
    """
    Owns at most one scheduled completion callback.

    ``notifier`` is the primary delivery channel chosen at construction;
    ``fallback`` takes over when it raises ``NotificationUnavailable``.
    """

    statusMessage = Signal(str)
    armed = Signal()
    finished = Signal()

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        prompter: UserPrompter,
        notifier: Notifier,
        fallback: Notifier,
        settings_provider: Callable[[], TimerSettings],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._logger = app_logger.get_logger()
        self._scheduler = scheduler
        self._prompter = prompter
        self._notifier = notifier
        self._fallback = fallback
        self._settings_provider = settings_provider
        self._handle: Optional[ScheduledCall] = None

    @property
    def state(self) -> TimerState:
        return TimerState.ARMED if self._handle is not None else TimerState.IDLE

    @property
    def handle(self) -> Optional[ScheduledCall]:
        return self._handle

    def start(self, duration_minutes: Optional[int] = None) -> Optional[ScheduledCall]:
        if self._handle is not None:
            if not self._prompter.confirm("A timer is already running. Replace it?"):
                self._logger.info("User kept the running timer.")
                self.remaining()
                return None
            self.cancel()

        if duration_minutes is None:
            duration_minutes = self._settings_provider().default_duration_minutes
        delay_seconds = duration_minutes * 60

        handle = self._scheduler.schedule_once(delay_seconds, self.on_complete)
        self._handle = handle

        self._logger.info("Timer armed for {} minutes.", duration_minutes)
        self._emit_status(f"Timer set for {duration_minutes} minutes.")
        self.armed.emit()
        return handle

    def cancel(self) -> None:
        if self._handle is None:
            return
        self._scheduler.cancel(self._handle)
        self._handle = None
        self._logger.info("Timer cancelled.")
        self._emit_status("Timer cancelled.")

    def time_left(self) -> Optional[timedelta]:
        if self._handle is None:
            return None
        return self._scheduler.time_until(self._handle)

    def remaining(self) -> str:
        left = self.time_left()
        message = NO_TIMER_MESSAGE if left is None else format_remaining(left)
        self._emit_status(message)
        return message

    def on_complete(self) -> None:
        """Scheduler callback: deliver the completion message and go idle."""
        if self._handle is None:
            self._logger.debug("Completion fired with no timer armed; ignoring.")
            return
        message = self._settings_provider().completion_message
        try:
            self._deliver(message)
        finally:
            self._handle = None
            self._logger.info("Timer finished.")
            self.finished.emit()

    def _deliver(self, message: str) -> None:
        try:
            self._notifier.notify(APP_TITLE, message)
        except NotificationUnavailable as exc:
            self._logger.warning("Desktop notification unavailable ({}); using full-screen display.", exc)
            self._fallback.notify(APP_TITLE, message)

    def _emit_status(self, message: str) -> None:
        self.statusMessage.emit(message)
