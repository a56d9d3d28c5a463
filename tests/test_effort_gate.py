"""Tests for the clock-in effort gate."""

import pytest

from core.effort_gate import EffortGate
from core.outline_host import OutlineHost
from core.timer_controller import TimerState
from shared.outline_entry import EFFORT_PROPERTY, OutlineEntry


@pytest.fixture
def gate(controller, prompter, timer_settings):
    return EffortGate(controller=controller, prompter=prompter, settings_provider=lambda: timer_settings)


class TestEffortGate:
    """Prompting for effort and arming the timer."""

    def test_prompts_and_stores_small_effort_without_timer(self, gate, prompter, controller, timer_settings):
        """An entered effort of 5 is stored and stays under the threshold."""
        prompter.choice = "5"
        entry = OutlineEntry(heading="Write report")

        gate.before_clock_in(entry)

        assert entry.get_property(EFFORT_PROPERTY) == "5"
        assert prompter.choices_offered == [timer_settings.effort_presets]
        assert controller.state is TimerState.IDLE

    def test_existing_large_effort_starts_threshold_timer(self, gate, prompter, controller, scheduler):
        """Effort 60 skips the prompt and arms a timer for the threshold, not 60."""
        entry = OutlineEntry(heading="Deep work", properties={EFFORT_PROPERTY: "60"})

        gate.before_clock_in(entry)

        assert prompter.choices_offered == []
        assert controller.state is TimerState.ARMED
        assert controller.handle.delay_seconds == 49 * 60
        assert len(scheduler.pending) == 1

    def test_declined_prompt_leaves_entry_untouched(self, gate, prompter, controller):
        """No answer means no effort property and no timer."""
        prompter.choice = ""
        entry = OutlineEntry(heading="Inbox")

        gate.before_clock_in(entry)

        assert entry.get_property(EFFORT_PROPERTY) is None
        assert controller.state is TimerState.IDLE

    def test_whitespace_answer_is_treated_as_declined(self, gate, prompter, controller):
        prompter.choice = "   "
        entry = OutlineEntry(heading="Inbox")

        gate.before_clock_in(entry)

        assert EFFORT_PROPERTY not in entry.properties
        assert controller.state is TimerState.IDLE

    def test_answer_is_stripped_before_storing(self, gate, prompter, controller):
        prompter.choice = "  75 "
        entry = OutlineEntry(heading="Refactor")

        gate.before_clock_in(entry)

        assert entry.get_property(EFFORT_PROPERTY) == "75"
        assert controller.state is TimerState.ARMED

    @pytest.mark.parametrize("effort", ["soon", "", "  ", "-5", "1:75"])
    def test_unreadable_effort_starts_no_timer(self, gate, prompter, controller, effort):
        """Blank or non-numeric effort counts as below the threshold."""
        entry = OutlineEntry(heading="Misc", properties={EFFORT_PROPERTY: effort})

        gate.before_clock_in(entry)

        assert prompter.choices_offered == []
        assert controller.state is TimerState.IDLE

    def test_effort_equal_to_threshold_starts_no_timer(self, gate, controller):
        entry = OutlineEntry(heading="Exact", properties={EFFORT_PROPERTY: "49"})

        gate.before_clock_in(entry)

        assert controller.state is TimerState.IDLE

    def test_decimal_effort_above_threshold_starts_threshold_timer(self, gate, controller):
        """A decimal effort such as 60.5 is numeric and arms the threshold timer."""
        entry = OutlineEntry(heading="Review", properties={EFFORT_PROPERTY: "60.5"})

        gate.before_clock_in(entry)

        assert controller.state is TimerState.ARMED
        assert controller.handle.delay_seconds == 49 * 60

    def test_decimal_effort_just_over_threshold_starts_timer(self, gate, controller):
        entry = OutlineEntry(heading="Review", properties={EFFORT_PROPERTY: "49.5"})

        gate.before_clock_in(entry)

        assert controller.state is TimerState.ARMED

    def test_clock_value_effort_is_understood(self, gate, controller):
        entry = OutlineEntry(heading="Long", properties={EFFORT_PROPERTY: "1:30"})

        gate.before_clock_in(entry)

        assert controller.state is TimerState.ARMED


class TestHostHook:
    """The gate connected to the outline host."""

    def test_gate_runs_before_clock_starts(self, qapp, gate, prompter, controller):
        host = OutlineHost()
        gate.install(host)
        seen = []
        host.clockedIn.connect(lambda entry: seen.append((entry.effort, controller.state)))
        prompter.choice = "90"
        entry = OutlineEntry(heading="Plan sprint")

        host.clock_in(entry)

        assert seen == [("90", TimerState.ARMED)]
        assert entry.is_clocked_in
        assert host.current_entry is entry
