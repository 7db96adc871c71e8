from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_hhmm, now_local
from ..common.validators import require_hhmm, require_iso_date, require_non_empty
from ..core.constants import ENTRY_ID_PREFIX
from ..core.enums import EntryStatus
from ..core.exceptions import ValidationError
from .aggregator import build_summary, entry_minutes, filter_entries, format_duration, sort_entries
from .calculator.base import DurationCalculator
from .calculator.standard_calculator import StandardDurationCalculator
from .model import AttendanceSummary, FilterState, TimeEntry
from .repository import TimeEntryRepository
from .seed import SEED_ENTRIES

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    EntryStatus.CLOCKED_IN: "Clocked In",
    EntryStatus.CLOCKED_OUT: "Clocked Out",
    EntryStatus.ON_BREAK: "On Break",
}

STATUS_CLASSES = {
    EntryStatus.CLOCKED_IN: "bg-success/10 text-success",
    EntryStatus.CLOCKED_OUT: "bg-muted text-muted-foreground",
    EntryStatus.ON_BREAK: "bg-warning/10 text-warning",
}


@dataclass(frozen=True)
class DashboardData:
    rows: list[dict]
    summary: dict


def get_initials(name: str) -> str:
    parts = [p for p in name.split(" ") if p]
    return "".join(p[0].upper() for p in parts[:2])[:2]


class TimeEntryService:
    """Use cases of the Time Tracking page."""

    def __init__(
        self,
        entries: TimeEntryRepository,
        *,
        calculator: Optional[DurationCalculator] = None,
        seed_if_empty: bool = False,
    ):
        self._entries = entries
        self._calculator = calculator or StandardDurationCalculator()
        self._seed_if_empty = bool(seed_if_empty)

    def _snapshot(self) -> Sequence[TimeEntry]:
        if self._seed_if_empty:
            return self.ensure_seeded()
        return self._entries.list_all()

    def ensure_seeded(self) -> Sequence[TimeEntry]:
        entries = self._entries.list_all()
        if entries:
            return entries

        logger.info("No time entries found, creating %d demo entries", len(SEED_ENTRIES))
        for e in SEED_ENTRIES:
            self._entries.create(e)
        return self._entries.list_all()

    def list_entries(self, filters: Optional[FilterState] = None) -> list[TimeEntry]:
        return sort_entries(filter_entries(self._snapshot(), filters or FilterState()))

    def summarize(self, filters: Optional[FilterState] = None) -> AttendanceSummary:
        return build_summary(self._snapshot(), filters, calculator=self._calculator)

    def get_dashboard(self, filters: Optional[FilterState] = None) -> DashboardData:
        snapshot = self._snapshot()
        filters = filters or FilterState()
        visible = sort_entries(filter_entries(snapshot, filters))
        summary = build_summary(snapshot, filters, calculator=self._calculator)

        out = summary.to_dict()
        out["weeklyTotal"] = format_duration(summary.weekly_total_minutes)
        for row, daily in zip(out["dailyTotals"], summary.daily_totals):
            row["duration"] = format_duration(daily.minutes)
        return DashboardData(rows=[self._to_ui(e) for e in visible], summary=out)

    def add_entry(
        self,
        *,
        employee: str,
        location: str,
        date: str,
        clock_in: str,
        clock_out: Optional[str] = None,
        status: EntryStatus = EntryStatus.CLOCKED_IN,
        now: Optional[datetime] = None,
    ) -> TimeEntry:
        employee = require_non_empty(employee, "Employee")
        location = require_non_empty(location, "Location")
        date = require_iso_date(date, "Date")
        clock_in = require_hhmm(clock_in, "Clock in")
        if isinstance(clock_out, str) and not clock_out.strip():
            clock_out = None
        if clock_out is not None:
            clock_out = require_hhmm(clock_out, "Clock out")

        now = now or now_local()
        entry = TimeEntry(
            entry_id=f"{ENTRY_ID_PREFIX}{int(now.timestamp() * 1000) % 1_000_000:06d}",
            employee=employee,
            initials=get_initials(employee),
            location=location,
            date=date,
            clock_in=clock_in,
            clock_out=clock_out,
            status=EntryStatus.CLOCKED_OUT if clock_out else EntryStatus(status),
        )
        created = self._entries.create(entry)
        logger.info("Created time entry %s for %s", created.entry_id, created.employee)
        return created

    def remove_entry(self, entry_id: str) -> None:
        entry_id = require_non_empty(entry_id, "Entry id")
        self._entries.delete(entry_id)
        logger.info("Deleted time entry %s", entry_id)

    def clock_out_now(self, entry_id: str, *, now: Optional[datetime] = None) -> TimeEntry:
        entry = next((e for e in self._entries.list_all() if e.entry_id == entry_id), None)
        if not entry:
            raise ValidationError("Time entry not found")
        if entry.status == EntryStatus.CLOCKED_OUT:
            raise ValidationError("Entry is already clocked out")

        now = now or now_local()
        updated = self._entries.update(
            replace(entry, clock_out=format_hhmm(now), status=EntryStatus.CLOCKED_OUT)
        )
        logger.info("Clocked out time entry %s at %s", entry_id, updated.clock_out)
        return updated

    def _to_ui(self, e: TimeEntry) -> dict:
        row = e.to_dict()
        row["statusLabel"] = STATUS_LABELS[e.status]
        row["cssClass"] = STATUS_CLASSES[e.status]
        row["minutes"] = entry_minutes(e, self._calculator)
        row["duration"] = format_duration(row["minutes"]) if e.clock_out else "—"
        return row
