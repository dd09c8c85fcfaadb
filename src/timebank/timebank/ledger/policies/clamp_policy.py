from __future__ import annotations

from ..model import DayRecord
from .base import DurationStrategy


class ClampStrategy(DurationStrategy):
    """Negative worked time is recorded as zero."""

    def worked_minutes(self, *, day: DayRecord, minutes: int) -> int:
        return max(minutes, 0)
