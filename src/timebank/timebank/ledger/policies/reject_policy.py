from __future__ import annotations

from ...common.clock import minutes_of
from ...core.exceptions import ValidationError
from ..model import DayRecord
from .base import DurationStrategy


class RejectStrategy(DurationStrategy):
    """Refuse a punch that repeats or precedes the day's previous last punch."""

    def worked_minutes(self, *, day: DayRecord, minutes: int) -> int:
        previous, latest = day.punches[-2], day.punches[-1]
        if minutes_of(latest) <= minutes_of(previous):
            raise ValidationError(
                f"Marcação {latest} de {day.date} repetida ou fora de ordem "
                f"(última marcação registrada: {previous})"
            )
        return minutes
