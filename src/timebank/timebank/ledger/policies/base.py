from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import DayRecord


class DurationStrategy(ABC):
    """Strategy Pattern: how a day's duplicate or out-of-order punches are treated.

    ``day.punches`` always holds at least two punches, the newest one last;
    ``minutes`` is the lunch-adjusted worked time computed from them.
    """

    @abstractmethod
    def worked_minutes(self, *, day: DayRecord, minutes: int) -> int:
        raise NotImplementedError
