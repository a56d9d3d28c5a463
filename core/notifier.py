"""
Notification delivery for finished timers.
"""

from __future__ import annotations

from typing import Protocol

from plyer import notification

from core.settings import TimerSettings
from effort_timer_core.effort_timer_core import logger as app_logger

_LOGGER = app_logger.get_logger()

APP_TITLE = "Effort Timer"


class NotificationUnavailable(RuntimeError):
    """Raised when a notifier cannot deliver on this machine."""


class Notifier(Protocol):
    def notify(self, title: str, message: str) -> None:
        ...


class DesktopNotifier:
    """Native desktop notification through plyer."""

    def __init__(self, app_name: str = APP_TITLE, timeout_seconds: int = 10) -> None:
        self.app_name = app_name
        self.timeout_seconds = timeout_seconds

    def notify(self, title: str, message: str) -> None:
        try:
            notification.notify(
                title=title,
                message=message,
                app_name=self.app_name,
                timeout=self.timeout_seconds,
            )
        except NotImplementedError as exc:
            raise NotificationUnavailable("No desktop notification backend for this platform.") from exc
        except Exception as exc:
            # Backends raise their own types, e.g. DBusException without a session bus.
            raise NotificationUnavailable(f"Desktop notification failed: {exc}") from exc
        _LOGGER.debug("Desktop notification delivered: {}", message)


def build_notifier(settings: TimerSettings, fallback: Notifier) -> Notifier:
    """Pick the primary notifier once, based on configuration."""
    if settings.desktop_notifications:
        return DesktopNotifier()
    _LOGGER.info("Desktop notifications disabled; using the full-screen display.")
    return fallback
