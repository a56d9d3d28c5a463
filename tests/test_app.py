"""Tests for the application coordinator wiring."""

import pytest
from PySide6.QtCore import QSettings

from core.app import AppCoordinator
from core.settings import SettingsManager, TimerSettings
from core.timer_controller import TimerState
from shared.outline_entry import EFFORT_PROPERTY, OutlineEntry


@pytest.fixture
def manager(tmp_path):
    settings = QSettings(str(tmp_path / "effort-timer.ini"), QSettings.Format.IniFormat)
    manager = SettingsManager(settings)
    manager.write_settings(TimerSettings(threshold_minutes=30, desktop_notifications=False))
    return manager


@pytest.fixture
def coordinator(qapp, manager):
    coordinator = AppCoordinator(settings_manager=manager)
    yield coordinator
    coordinator.controller.cancel()


def test_clock_in_with_large_effort_arms_timer(coordinator):
    entry = OutlineEntry(heading="Write docs", properties={EFFORT_PROPERTY: "45"})

    coordinator.host.clock_in(entry)

    assert coordinator.controller.state is TimerState.ARMED
    assert coordinator.controller.handle.delay_seconds == 30 * 60
    assert coordinator.controller.remaining().endswith("seconds left")


def test_clock_in_with_small_effort_leaves_timer_idle(coordinator):
    coordinator.host.clock_in(OutlineEntry(heading="Email", properties={EFFORT_PROPERTY: "10"}))

    assert coordinator.controller.state is TimerState.IDLE


def test_settings_changes_are_picked_up(coordinator, manager):
    manager.write_settings(TimerSettings(threshold_minutes=5, desktop_notifications=False))

    coordinator._reload_settings()
    coordinator.host.clock_in(OutlineEntry(heading="Email", properties={EFFORT_PROPERTY: "10"}))

    assert coordinator.current_settings().threshold_minutes == 5
    assert coordinator.controller.handle.delay_seconds == 5 * 60


def test_tray_icon_follows_timer_state(coordinator):
    assert not coordinator.tray_shows_armed

    coordinator.controller.start(10)
    assert coordinator.tray_shows_armed

    coordinator.controller.cancel()
    assert not coordinator.tray_shows_armed
