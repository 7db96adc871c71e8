from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.constants import STATUS_FILTER_ALL
from ..core.enums import EntryStatus
from ..core.exceptions import ValidationError
from ..common.validators import require_iso_date


def _text(data: Mapping[str, Any], key: str) -> Optional[str]:
    """Wire value as a string; numbers are stringified, other shapes reject the record."""
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValidationError(f"Time entry field {key!r} must be a string, got {type(value).__name__}")


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock-in/clock-out record for an employee on a date.

    Note: `date`, `clock_in` and `clock_out` stay as the strings the resource API
    sends (`YYYY-MM-DD` / `HH:MM`). They are compared and parsed lazily so a
    malformed value degrades the entry's duration instead of failing the load.
    """

    entry_id: str
    employee: Optional[str]
    initials: Optional[str]
    location: Optional[str]
    date: Optional[str]
    clock_in: Optional[str]
    clock_out: Optional[str]
    status: EntryStatus

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimeEntry":
        try:
            status = EntryStatus(data.get("status"))
        except ValueError:
            raise ValidationError(f"Unknown time entry status: {data.get('status')!r}") from None

        return cls(
            entry_id=_text(data, "id") or "",
            employee=_text(data, "employee"),
            initials=_text(data, "initials"),
            location=_text(data, "location"),
            date=_text(data, "date"),
            clock_in=_text(data, "clockIn"),
            clock_out=_text(data, "clockOut") or None,
            status=status,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "employee": self.employee,
            "initials": self.initials,
            "location": self.location,
            "date": self.date,
            "clockIn": self.clock_in,
            "clockOut": self.clock_out,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class DailyTotal:
    date: str
    minutes: int

    def to_dict(self) -> dict:
        return {"date": self.date, "minutes": self.minutes}


@dataclass(frozen=True)
class StatusCounts:
    clocked_in: int = 0
    on_break: int = 0
    clocked_out: int = 0

    def to_dict(self) -> dict:
        return {
            "clockedIn": self.clocked_in,
            "onBreak": self.on_break,
            "clockedOut": self.clocked_out,
        }


@dataclass(frozen=True)
class FilterState:
    """Search/status/date-range filters owned by the caller (one per request)."""

    query: str = ""
    status: Optional[EntryStatus] = None
    from_date: str = ""
    to_date: str = ""

    @classmethod
    def from_params(
        cls,
        *,
        query: Optional[str] = None,
        status: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> "FilterState":
        status_value = (status or STATUS_FILTER_ALL).strip()
        if status_value == STATUS_FILTER_ALL:
            parsed_status = None
        else:
            try:
                parsed_status = EntryStatus(status_value)
            except ValueError:
                raise ValidationError(f"Unknown status filter: {status_value!r}") from None

        from_date = (from_date or "").strip()
        to_date = (to_date or "").strip()
        if from_date:
            require_iso_date(from_date, "From date")
        if to_date:
            require_iso_date(to_date, "To date")

        return cls(
            query=(query or "").strip(),
            status=parsed_status,
            from_date=from_date,
            to_date=to_date,
        )


@dataclass(frozen=True)
class AttendanceSummary:
    """Display-ready aggregates for a filtered set of entries."""

    daily_totals: list[DailyTotal] = field(default_factory=list)
    weekly_total_minutes: int = 0
    status_counts: StatusCounts = field(default_factory=StatusCounts)

    def to_dict(self) -> dict:
        return {
            "dailyTotals": [d.to_dict() for d in self.daily_totals],
            "weeklyTotalMinutes": self.weekly_total_minutes,
            "statusCounts": self.status_counts.to_dict(),
        }
