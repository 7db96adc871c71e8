"""Time & attendance aggregation.

Pure functions over an entry snapshot: filter -> sort -> per-day totals ->
range total -> status counts. Nothing here does I/O or mutates entries.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from ..core.enums import EntryStatus
from .calculator.base import DurationCalculator
from .calculator.standard_calculator import StandardDurationCalculator, parse_minutes
from .model import AttendanceSummary, DailyTotal, FilterState, StatusCounts, TimeEntry

_DEFAULT_CALCULATOR = StandardDurationCalculator()

__all__ = [
    "parse_minutes",
    "entry_minutes",
    "format_duration",
    "matches_filters",
    "filter_entries",
    "sort_entries",
    "daily_totals",
    "range_total",
    "status_counts",
    "build_summary",
]


def entry_minutes(entry: TimeEntry, calculator: Optional[DurationCalculator] = None) -> int:
    return (calculator or _DEFAULT_CALCULATOR).worked_minutes(entry)


def format_duration(total_minutes: float) -> str:
    """Render minutes as `"{h}h {mm}m"`, e.g. 125 -> "2h 05m"."""
    if not isinstance(total_minutes, (int, float)) or not math.isfinite(total_minutes):
        total_minutes = 0
    minutes = max(0, math.floor(total_minutes))
    return f"{minutes // 60}h {minutes % 60:02d}m"


def _contains(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.lower()


def matches_filters(entry: TimeEntry, filters: FilterState) -> bool:
    q = filters.query.strip().lower()
    if q and not (
        _contains(entry.employee, q) or _contains(entry.location, q) or _contains(entry.entry_id, q)
    ):
        return False

    if filters.status is not None and entry.status != filters.status:
        return False

    if filters.from_date and (not entry.date or entry.date < filters.from_date):
        return False
    if filters.to_date and (not entry.date or entry.date > filters.to_date):
        return False
    return True


def filter_entries(entries: Iterable[TimeEntry], filters: FilterState) -> list[TimeEntry]:
    return [e for e in entries if matches_filters(e, filters)]


def _sort_key(entry: TimeEntry) -> tuple[str, str, str]:
    return (entry.date or "", entry.clock_in or "", entry.entry_id)


def sort_entries(entries: Iterable[TimeEntry]) -> list[TimeEntry]:
    """Newest first: date desc, then clock-in desc, then id desc.

    Zero-padded `HH:MM` strings sort the same lexically and numerically.
    """
    return sorted(entries, key=_sort_key, reverse=True)


def daily_totals(
    entries: Iterable[TimeEntry],
    *,
    calculator: Optional[DurationCalculator] = None,
    sort: bool = True,
) -> list[DailyTotal]:
    """Group entries by date and sum worked minutes per date.

    Dates whose entries are all open shifts still get a row with 0 minutes.
    With `sort=False` rows keep first-encounter order.
    """
    by_day: dict[str, int] = {}
    for e in entries:
        key = e.date or ""
        by_day[key] = by_day.get(key, 0) + entry_minutes(e, calculator)

    rows = [DailyTotal(date=d, minutes=m) for d, m in by_day.items()]
    if sort:
        rows.sort(key=lambda r: r.date, reverse=True)
    return rows


def range_total(daily: Iterable[DailyTotal]) -> int:
    return sum(d.minutes for d in daily)


def status_counts(entries: Iterable[TimeEntry]) -> StatusCounts:
    counts = {status: 0 for status in EntryStatus}
    for e in entries:
        counts[e.status] += 1
    return StatusCounts(
        clocked_in=counts[EntryStatus.CLOCKED_IN],
        on_break=counts[EntryStatus.ON_BREAK],
        clocked_out=counts[EntryStatus.CLOCKED_OUT],
    )


def build_summary(
    entries: Sequence[TimeEntry],
    filters: Optional[FilterState] = None,
    *,
    calculator: Optional[DurationCalculator] = None,
) -> AttendanceSummary:
    visible = sort_entries(filter_entries(entries, filters or FilterState()))
    daily = daily_totals(visible, calculator=calculator)
    return AttendanceSummary(
        daily_totals=daily,
        weekly_total_minutes=range_total(daily),
        status_counts=status_counts(visible),
    )
