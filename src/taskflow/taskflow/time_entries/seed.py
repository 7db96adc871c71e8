"""Demo entries created on first load when the resource is empty."""

from __future__ import annotations

from ..core.enums import EntryStatus
from .model import TimeEntry

SEED_ENTRIES: tuple[TimeEntry, ...] = (
    TimeEntry("1", "John Doe", "JD", "Building A", "2026-02-09", "08:30", None, EntryStatus.CLOCKED_IN),
    TimeEntry("2", "Sarah Miller", "SM", "Building B", "2026-02-09", "09:00", None, EntryStatus.CLOCKED_IN),
    TimeEntry("3", "Mike Johnson", "MJ", "Warehouse C", "2026-02-09", "07:45", None, EntryStatus.ON_BREAK),
    TimeEntry("4", "Emily Brown", "EB", "Outdoor Areas", "2026-02-09", "06:00", "14:30", EntryStatus.CLOCKED_OUT),
    TimeEntry("5", "Alex Wilson", "AW", "Main Gate", "2026-02-08", "22:00", None, EntryStatus.CLOCKED_IN),
)
