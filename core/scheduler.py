"""
One-shot deferred callbacks on the Qt event loop.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Protocol

from PySide6.QtCore import QObject, Qt, QTimer


class ScheduledCall:
    """Opaque, cancellable handle to a callback waiting on a single-shot timer."""

    def __init__(self, timer: QTimer | None, delay_seconds: float) -> None:
        self._timer = timer
        self.delay_seconds = delay_seconds
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler(Protocol):
    def schedule_once(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        ...

    def time_until(self, handle: ScheduledCall) -> timedelta:
        ...

    def cancel(self, handle: ScheduledCall) -> None:
        ...


class QtScheduler(QObject):
    """
    Runs callbacks after a delay using single-shot ``QTimer`` objects.

    Everything executes on the thread that owns the scheduler, so callers
    never need locking.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)

    def schedule_once(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        timer = QTimer(self)
        timer.setSingleShot(True)
        # Coarse timers may drift past the requested delay.
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setInterval(max(0, int(delay_seconds * 1000)))
        handle = ScheduledCall(timer, delay_seconds)

        def _fire() -> None:
            if not handle.pending:
                return
            handle.fired = True
            timer.deleteLater()
            callback()

        timer.timeout.connect(_fire)  # type: ignore[arg-type]
        timer.start()
        return handle

    def time_until(self, handle: ScheduledCall) -> timedelta:
        if not handle.pending:
            return timedelta(0)
        remaining_ms = handle._timer.remainingTime()
        return timedelta(milliseconds=max(0, remaining_ms))

    def cancel(self, handle: ScheduledCall) -> None:
        if not handle.pending:
            return
        handle.cancelled = True
        handle._timer.stop()
        handle._timer.deleteLater()
