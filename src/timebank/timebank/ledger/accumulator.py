from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..common.clock import diff_minutes
from ..core.constants import DEFAULT_LUNCH_BREAK_MINUTES, DEFAULT_STANDARD_WORKDAY_MINUTES
from .model import DayRecord
from .policies.accept_policy import AcceptStrategy
from .policies.base import DurationStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkdayConfig:
    standard_workday_minutes: int = DEFAULT_STANDARD_WORKDAY_MINUTES
    lunch_break_minutes: int = DEFAULT_LUNCH_BREAK_MINUTES


class DayAccumulator:
    """Derive a day's entrada/saída and worked/overtime minutes from its punches.

    Only the first and last punches count; anything in between is kept for
    audit. The result depends on nothing but the punch list and the config,
    so recomputing an unchanged day gives the same record.
    """

    def __init__(self, config: Optional[WorkdayConfig] = None, *, strategy: Optional[DurationStrategy] = None):
        self._config = config or WorkdayConfig()
        self._strategy = strategy or AcceptStrategy()

    def recompute(self, day: DayRecord) -> DayRecord:
        if len(day.punches) < 2:
            return day

        entrada = day.punches[0]
        saida = day.punches[-1]

        worked = diff_minutes(entrada, saida) - self._config.lunch_break_minutes
        if worked < 0:
            logger.warning("Negative worked time on %s: %s -> %s (%d min)", day.date, entrada, saida, worked)
        worked = self._strategy.worked_minutes(day=day, minutes=worked)
        overtime = max(0, worked - self._config.standard_workday_minutes)

        return replace(
            day,
            entrada=entrada,
            saida=saida,
            worked_minutes=worked,
            overtime_minutes=overtime,
        )
