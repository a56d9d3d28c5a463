"""
Clock-in hook that asks for an effort estimate and arms the rest timer.
"""

from __future__ import annotations

from typing import Callable

from core.outline_host import OutlineHost
from core.prompts import UserPrompter
from core.settings import TimerSettings
from core.timer_controller import TimerController
from effort_timer_core.effort_timer_core import logger as app_logger
from shared.outline_entry import EFFORT_PROPERTY, OutlineEntry, parse_effort_minutes

_LOGGER = app_logger.get_logger()

EFFORT_PROMPT = "Effort (minutes or H:MM):"


class EffortGate:
    """
    Runs before an entry is clocked in. Entries without an effort estimate get
    one from the user; estimates above the threshold arm the rest timer for
    the threshold's length.
    """

    def __init__(
        self,
        *,
        controller: TimerController,
        prompter: UserPrompter,
        settings_provider: Callable[[], TimerSettings],
    ) -> None:
        self._controller = controller
        self._prompter = prompter
        self._settings_provider = settings_provider

    def install(self, host: OutlineHost) -> None:
        host.clockInStarting.connect(self.before_clock_in)

    def before_clock_in(self, entry: OutlineEntry) -> None:
        settings = self._settings_provider()

        if entry.get_property(EFFORT_PROPERTY) is None:
            answer = self._prompter.choose(EFFORT_PROMPT, settings.effort_presets).strip()
            if answer:
                entry.set_property(EFFORT_PROPERTY, answer)
                _LOGGER.info("Effort for '{}' set to {}.", entry.heading, answer)
            else:
                _LOGGER.debug("No effort given for '{}'.", entry.heading)

        effort_minutes = parse_effort_minutes(entry.get_property(EFFORT_PROPERTY))
        if effort_minutes is None:
            # Unknown effort counts as below the threshold.
            _LOGGER.debug("Effort for '{}' is missing or unreadable; no timer.", entry.heading)
            return

        if effort_minutes > settings.threshold_minutes:
            _LOGGER.info(
                "Effort {} exceeds threshold {}; arming rest timer.",
                effort_minutes,
                settings.threshold_minutes,
            )
            self._controller.start(settings.threshold_minutes)
