"""
Data types shared between the effort timer runtime and its host surfaces.
"""

from .outline_entry import EFFORT_PROPERTY, OutlineEntry, parse_effort_minutes  # noqa: F401
