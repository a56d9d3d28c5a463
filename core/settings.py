"""
QSettings-backed configuration for the effort timer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from PySide6.QtCore import QSettings

from effort_timer_core.effort_timer_core import logger as app_logger

_LOGGER = app_logger.get_logger()

ORGANIZATION_NAME = "EffortTimer"
APPLICATION_NAME = "EffortTimer"

DEFAULT_DURATION_MINUTES = 50
DEFAULT_THRESHOLD_MINUTES = 49
DEFAULT_COMPLETION_MESSAGE = "Time is up! Take a break."
DEFAULT_EFFORT_PRESETS = ("5", "15", "30", "45", "60", "90")
DEFAULT_FALLBACK_DISPLAY_SECONDS = 15

_MIN_MINUTES = 1
_MAX_MINUTES = 24 * 60
_MIN_DISPLAY_SECONDS = 3
_MAX_DISPLAY_SECONDS = 600


@dataclass(eq=True)
class TimerSettings:
    default_duration_minutes: int = DEFAULT_DURATION_MINUTES
    threshold_minutes: int = DEFAULT_THRESHOLD_MINUTES
    completion_message: str = DEFAULT_COMPLETION_MESSAGE
    effort_presets: List[str] = field(default_factory=lambda: list(DEFAULT_EFFORT_PRESETS))
    desktop_notifications: bool = True
    fallback_display_seconds: int = DEFAULT_FALLBACK_DISPLAY_SECONDS


class SettingsManager:
    """Loads persisted settings from QSettings and clamps invalid data."""

    def __init__(self, settings: Optional[QSettings] = None) -> None:
        self._settings = settings or QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    def read_settings(self) -> TimerSettings:
        self._settings.sync()
        return TimerSettings(
            default_duration_minutes=self._read_minutes(
                "Timer/DefaultDurationMinutes", DEFAULT_DURATION_MINUTES
            ),
            threshold_minutes=self._read_minutes("Timer/ThresholdMinutes", DEFAULT_THRESHOLD_MINUTES),
            completion_message=self._read_text("Timer/CompletionMessage", DEFAULT_COMPLETION_MESSAGE),
            effort_presets=self._read_presets(),
            desktop_notifications=self._read_bool("Notifications/Desktop", True),
            fallback_display_seconds=self._read_clamped(
                "Notifications/FallbackDisplaySeconds",
                DEFAULT_FALLBACK_DISPLAY_SECONDS,
                _MIN_DISPLAY_SECONDS,
                _MAX_DISPLAY_SECONDS,
            ),
        )

    def write_settings(self, settings: TimerSettings) -> None:
        self._settings.setValue("Timer/DefaultDurationMinutes", settings.default_duration_minutes)
        self._settings.setValue("Timer/ThresholdMinutes", settings.threshold_minutes)
        self._settings.setValue("Timer/CompletionMessage", settings.completion_message)
        # Stored as one string so single-item lists survive the INI round trip.
        self._settings.setValue("Timer/EffortPresets", ",".join(settings.effort_presets))
        self._settings.setValue("Notifications/Desktop", "true" if settings.desktop_notifications else "false")
        self._settings.setValue("Notifications/FallbackDisplaySeconds", settings.fallback_display_seconds)
        self._settings.sync()
        _LOGGER.info("Settings written to {}", self._settings.fileName())

    def _read_minutes(self, name: str, default: int) -> int:
        return self._read_clamped(name, default, _MIN_MINUTES, _MAX_MINUTES)

    def _read_clamped(self, name: str, default: int, minimum: int, maximum: int) -> int:
        raw = self._read_int(name)
        if raw is None:
            return default
        if raw < minimum or raw > maximum:
            _LOGGER.warning(
                "Invalid value {} found for {}. Clamping to safe bounds.",
                raw,
                name,
            )
        return max(minimum, min(maximum, raw))

    def _read_int(self, name: str) -> Optional[int]:
        value = self._settings.value(name)
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            _LOGGER.warning("Setting {} has non-integer value {!r}.", name, value)
            return None

    def _read_text(self, name: str, default: str) -> str:
        value = self._settings.value(name)
        if isinstance(value, list):
            # INI storage splits unquoted commas into a list.
            value = ", ".join(str(part) for part in value)
        if not isinstance(value, str) or not value.strip():
            return default
        return value

    def _read_bool(self, name: str, default: bool) -> bool:
        value = self._settings.value(name)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        lowered = str(value).strip().lower()
        if lowered in {"true", "1", "yes", "on"}:
            return True
        if lowered in {"false", "0", "no", "off"}:
            return False
        _LOGGER.warning("Setting {} has unexpected value {!r}.", name, value)
        return default

    def _read_presets(self) -> List[str]:
        value = self._settings.value("Timer/EffortPresets")
        if value is None:
            return list(DEFAULT_EFFORT_PRESETS)
        parts = value if isinstance(value, list) else str(value).split(",")
        presets = [str(part).strip() for part in parts if str(part).strip()]
        return presets or list(DEFAULT_EFFORT_PRESETS)
