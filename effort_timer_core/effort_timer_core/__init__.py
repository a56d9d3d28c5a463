"""
effort_timer_core package.

Holds process-level helpers for the effort timer application.
"""

__all__ = [
    "logger",
]
