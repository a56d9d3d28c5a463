"""
Outline entries carrying per-item properties such as the effort estimate.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Union

EFFORT_PROPERTY = "Effort"

_MINUTES_VALUE = re.compile(r"^\d+(\.\d+)?$", re.ASCII)
_CLOCK_VALUE = re.compile(r"^(\d+):([0-5]\d)$", re.ASCII)


@dataclass(slots=True)
class OutlineEntry:
    """A single heading in the outline together with its property drawer."""

    heading: str
    properties: Dict[str, str] = field(default_factory=dict)
    clocked_in_at: Optional[datetime] = None

    def get_property(self, name: str) -> Optional[str]:
        return self.properties.get(name)

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    @property
    def effort(self) -> Optional[str]:
        return self.get_property(EFFORT_PROPERTY)

    @property
    def is_clocked_in(self) -> bool:
        return self.clocked_in_at is not None


def parse_effort_minutes(value: Optional[str]) -> Optional[Union[int, float]]:
    """
    Convert an effort string to minutes.

    Accepts minute counts, whole or decimal (``"45"``, ``"60.5"``), and
    ``H:MM`` clock values (``"1:30"``). Returns ``None`` for absent, blank or unparseable input.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    if _MINUTES_VALUE.match(text):
        return float(text) if "." in text else int(text)
    match = _CLOCK_VALUE.match(text)
    if match:
        hours, minutes = match.groups()
        return int(hours) * 60 + int(minutes)
    return None
