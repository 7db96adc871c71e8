from __future__ import annotations

from typing import Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def list_all(self) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def create(self, entry: TimeEntry) -> TimeEntry:
        raise NotImplementedError

    def update(self, entry: TimeEntry) -> TimeEntry:
        raise NotImplementedError

    def delete(self, entry_id: str) -> None:
        raise NotImplementedError
