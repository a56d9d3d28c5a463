"""
Application coordinator wiring the rest timer, the effort gate and the tray.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PySide6.QtCore import QObject, QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QApplication, QInputDialog, QMenu, QStyle, QSystemTrayIcon

from core.effort_gate import EffortGate
from core.fullscreen_message import FullScreenMessage
from core.notifier import build_notifier
from core.outline_host import OutlineHost
from core.prompts import QtPrompter
from core.scheduler import QtScheduler
from core.settings import SettingsManager, TimerSettings
from core.timer_controller import TimerController, TimerState
from effort_timer_core.effort_timer_core import logger as app_logger
from shared.outline_entry import OutlineEntry

APP_NAME = "Effort Timer"
APP_VERSION = "1.0.0"
SETTINGS_REFRESH_INTERVAL_MS = 15000


@dataclass
class AppCoordinator(QObject):
    settings_manager: SettingsManager = field(default_factory=SettingsManager)

    def __post_init__(self) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()
        self._manual_shutdown_requested = False
        self._settings: TimerSettings = self.settings_manager.read_settings()

        self._scheduler = QtScheduler(self)
        self._prompter = QtPrompter()
        self._fullscreen = FullScreenMessage(self._settings.fallback_display_seconds)
        self._host = OutlineHost(self)
        self.controller = TimerController(
            scheduler=self._scheduler,
            prompter=self._prompter,
            notifier=build_notifier(self._settings, self._fullscreen),
            fallback=self._fullscreen,
            settings_provider=self.current_settings,
            parent=self,
        )
        self.gate = EffortGate(
            controller=self.controller,
            prompter=self._prompter,
            settings_provider=self.current_settings,
        )
        self.gate.install(self._host)

        self.controller.statusMessage.connect(self._on_status_message)
        self._host.clockedIn.connect(self._on_clocked_in)

        self._tray = QSystemTrayIcon(self)
        self._idle_icon = QApplication.style().standardIcon(QStyle.StandardPixmap.SP_BrowserReload)
        self._armed_icon = QApplication.style().standardIcon(QStyle.StandardPixmap.SP_MediaPlay)
        self._tray_shows_armed = False
        self._tray.setIcon(self._idle_icon)
        self._tray.setToolTip(f"{APP_NAME} v{APP_VERSION}")
        self.controller.armed.connect(self._refresh_tray_icon)
        self.controller.finished.connect(self._refresh_tray_icon)

        menu = QMenu()
        clock_in_action = QAction("Clock In…", menu)
        start_action = QAction("Start Timer", menu)
        cancel_action = QAction("Cancel Timer", menu)
        remaining_action = QAction("Time Remaining", menu)
        exit_action = QAction("Exit", menu)
        menu.addAction(clock_in_action)
        menu.addSeparator()
        menu.addAction(start_action)
        menu.addAction(cancel_action)
        menu.addAction(remaining_action)
        menu.addSeparator()
        menu.addAction(exit_action)
        self._menu = menu
        self._tray.setContextMenu(menu)

        clock_in_action.triggered.connect(self._clock_in)
        start_action.triggered.connect(lambda: self.controller.start())
        cancel_action.triggered.connect(self.controller.cancel)
        remaining_action.triggered.connect(self.controller.remaining)
        exit_action.triggered.connect(self.shutdown)

        self._settings_timer = QTimer(self)
        self._settings_timer.setInterval(SETTINGS_REFRESH_INTERVAL_MS)
        self._settings_timer.timeout.connect(self._reload_settings)

    def current_settings(self) -> TimerSettings:
        return self._settings

    @property
    def host(self) -> OutlineHost:
        return self._host

    def start(self) -> None:
        self._logger.info(
            "Starting effort timer (threshold={} min, default={} min).",
            self._settings.threshold_minutes,
            self._settings.default_duration_minutes,
        )
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray.show()
        else:
            self._logger.warning("System tray unavailable; tray menu will not be shown.")
        self._settings_timer.start()

    def shutdown(self) -> None:
        self._logger.info("Shutting down application on user request.")
        self._manual_shutdown_requested = True
        self._settings_timer.stop()
        self.controller.cancel()
        self._fullscreen.dismiss()
        self._tray.hide()
        QApplication.instance().quit()

    @property
    def manual_shutdown_requested(self) -> bool:
        return self._manual_shutdown_requested

    def _reload_settings(self) -> None:
        new_settings = self.settings_manager.read_settings()
        if new_settings != self._settings:
            self._logger.info("Detected settings change. Applying updates.")
            self._apply_settings(new_settings)

    def _apply_settings(self, settings: TimerSettings) -> None:
        previous = self._settings
        self._settings = settings
        self._fullscreen.display_seconds = settings.fallback_display_seconds
        if previous.threshold_minutes != settings.threshold_minutes:
            self._logger.info("Threshold updated to {} minutes.", settings.threshold_minutes)
        if previous.desktop_notifications != settings.desktop_notifications:
            # The notifier is chosen once at construction.
            self._logger.info("Notifier change takes effect after restart.")

    def _clock_in(self) -> None:
        heading, accepted = QInputDialog.getText(None, APP_NAME, "Task:")
        heading = heading.strip()
        if not accepted or not heading:
            return
        self._host.clock_in(OutlineEntry(heading=heading))

    def _on_clocked_in(self, entry: OutlineEntry) -> None:
        effort = entry.effort or "none"
        self._on_status_message(f"Clocked in: {entry.heading} (effort {effort})")

    def _on_status_message(self, message: str) -> None:
        self._logger.info("{}", message)
        self._refresh_tray_icon()
        self._tray.setToolTip(f"{APP_NAME}: {message}")
        if self._tray.isVisible() and self._tray.supportsMessages():
            self._tray.showMessage(APP_NAME, message, QSystemTrayIcon.MessageIcon.Information, 3000)

    @property
    def tray_shows_armed(self) -> bool:
        return self._tray_shows_armed

    def _refresh_tray_icon(self) -> None:
        armed = self.controller.state is TimerState.ARMED
        if armed == self._tray_shows_armed:
            return
        self._tray_shows_armed = armed
        self._tray.setIcon(self._armed_icon if armed else self._idle_icon)
