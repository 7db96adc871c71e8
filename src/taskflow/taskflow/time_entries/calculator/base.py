from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import TimeEntry


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(self, entry: TimeEntry) -> int:
        raise NotImplementedError
