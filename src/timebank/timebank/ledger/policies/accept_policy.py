from __future__ import annotations

from ..model import DayRecord
from .base import DurationStrategy


class AcceptStrategy(DurationStrategy):
    """Keep whatever the punches give, negative values included."""

    def worked_minutes(self, *, day: DayRecord, minutes: int) -> int:
        return minutes
