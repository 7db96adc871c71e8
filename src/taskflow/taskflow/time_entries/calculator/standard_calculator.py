from __future__ import annotations

from typing import Optional

from .base import DurationCalculator
from ..model import TimeEntry


def _is_digits(value: str) -> bool:
    # ASCII only: int() would also take "1_0" or non-Latin digits
    return value.isascii() and value.isdigit()


def parse_minutes(value: Optional[str]) -> Optional[int]:
    """Parse `H:MM` / `HH:MM` into minutes since midnight.

    Returns None when either part is not a number; callers treat that as
    "unknown", never as zero.
    """
    if not isinstance(value, str):
        return None
    parts = value.split(":")
    if len(parts) < 2:
        return None
    hours, minutes = parts[0].strip(), parts[1].strip()
    if not (_is_digits(hours) and _is_digits(minutes)):
        return None
    return int(hours) * 60 + int(minutes)


class StandardDurationCalculator(DurationCalculator):
    """Standard rule: out - in on the same day, not below 0.

    Open shifts (no clock-out) and unparsable times count as 0 minutes.
    A shift crossing midnight (22:00 -> 06:00) also clamps to 0 because
    entries carry no date for the clock-out.
    """

    def worked_minutes(self, entry: TimeEntry) -> int:
        start = parse_minutes(entry.clock_in)
        if start is None:
            return 0
        end = parse_minutes(entry.clock_out) if entry.clock_out else None
        if end is None:
            return 0
        return max(end - start, 0)
