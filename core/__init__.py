"""
Core runtime for the effort timer: scheduling, the rest timer and the effort gate.
"""

from .timer_controller import TimerController, TimerState  # noqa: F401
from .effort_gate import EffortGate  # noqa: F401
