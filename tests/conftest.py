"""Pytest configuration and fixtures for the effort timer tests."""

import os
import tempfile
from datetime import timedelta

import pytest

# Headless Qt and a throwaway log directory; must be set before the app modules load.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("EFFORT_TIMER_LOG_DIR", tempfile.mkdtemp(prefix="effort-timer-logs-"))


class FakeScheduler:
    """Scheduler with a manual clock; callbacks run only on ``advance``."""

    def __init__(self):
        self.now = 0.0
        self.calls = []

    def schedule_once(self, delay_seconds, callback):
        from core.scheduler import ScheduledCall

        handle = ScheduledCall(None, delay_seconds)
        self.calls.append((self.now + delay_seconds, handle, callback))
        return handle

    def time_until(self, handle):
        for due, candidate, _ in self.calls:
            if candidate is handle and handle.pending:
                return timedelta(seconds=max(0.0, due - self.now))
        return timedelta(0)

    def cancel(self, handle):
        handle.cancelled = True

    def advance(self, seconds):
        self.now += seconds
        for due, handle, callback in list(self.calls):
            if due <= self.now and handle.pending:
                handle.fired = True
                callback()

    @property
    def pending(self):
        return [handle for _, handle, _ in self.calls if handle.pending]


class ScriptedPrompter:
    """Answers prompts from preset values and records what was asked."""

    def __init__(self, confirm_answer=True, choice=""):
        self.confirm_answer = confirm_answer
        self.choice = choice
        self.questions = []
        self.choices_offered = []

    def confirm(self, question):
        self.questions.append(question)
        return self.confirm_answer

    def choose(self, prompt, choices):
        self.choices_offered.append(list(choices))
        return self.choice


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, title, message):
        self.messages.append((title, message))


class UnavailableNotifier:
    def __init__(self):
        self.attempts = 0

    def notify(self, title, message):
        from core.notifier import NotificationUnavailable

        self.attempts += 1
        raise NotificationUnavailable("no backend")


@pytest.fixture
def timer_settings():
    from core.settings import TimerSettings

    return TimerSettings(default_duration_minutes=50, threshold_minutes=49, completion_message="done")


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def prompter():
    return ScriptedPrompter()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fallback():
    return RecordingNotifier()


@pytest.fixture
def controller(qapp, scheduler, prompter, notifier, fallback, timer_settings):
    from core.timer_controller import TimerController

    return TimerController(
        scheduler=scheduler,
        prompter=prompter,
        notifier=notifier,
        fallback=fallback,
        settings_provider=lambda: timer_settings,
    )


@pytest.fixture
def status_messages(controller):
    messages = []
    controller.statusMessage.connect(messages.append)
    return messages
