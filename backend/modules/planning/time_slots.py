"""
modules/planning/time_slots.py
--------------------------------
Fixed display slots for a day's activities.  Presentation metadata only:
activity durations are not checked against slot width.
"""

from __future__ import annotations
from datetime import time

# (start, end) per position within the day
_DAY_SLOTS: list[tuple[time, time]] = [
    (time(9, 0),  time(12, 0)),
    (time(13, 0), time(15, 0)),
    (time(16, 0), time(18, 0)),
]


def _fmt(t: time) -> str:
    """time(13, 0) → '1:00 PM'."""
    hour = t.hour % 12 or 12
    period = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d} {period}"


def slot_for(index: int) -> str:
    """Slot label for the activity at `index`; out-of-range wraps to the first slot."""
    start, end = _DAY_SLOTS[index] if 0 <= index < len(_DAY_SLOTS) else _DAY_SLOTS[0]
    return f"{_fmt(start)} - {_fmt(end)}"
