from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import TIME_ENTRIES_RESOURCE
from ..core.exceptions import ValidationError
from ..resources.client import ResourceClient
from .model import TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


class RestTimeEntryRepository(TimeEntryRepository):
    """Time entries stored behind the generic `time-entries` REST resource."""

    def __init__(self, client: ResourceClient, *, resource: str = TIME_ENTRIES_RESOURCE):
        self._client = client
        self._resource = resource

    def list_all(self) -> Sequence[TimeEntry]:
        entries = []
        for item in self._client.list(self._resource):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object time entry: %r", item)
                continue
            try:
                entries.append(TimeEntry.from_dict(item))
            except ValidationError as e:
                logger.warning("Skipping time entry %r: %s", item.get("id"), e)
        return entries

    def create(self, entry: TimeEntry) -> TimeEntry:
        item = self._client.create(self._resource, entry.to_dict())
        return TimeEntry.from_dict(item) if isinstance(item, dict) else entry

    def update(self, entry: TimeEntry) -> TimeEntry:
        item = self._client.update(self._resource, entry.entry_id, entry.to_dict())
        return TimeEntry.from_dict(item) if isinstance(item, dict) else entry

    def delete(self, entry_id: str) -> None:
        self._client.delete(self._resource, entry_id)
