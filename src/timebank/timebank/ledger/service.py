from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_clock, require_iso_date, require_non_empty
from ..extraction.model import ExtractedPunch
from .accumulator import DayAccumulator
from .locking import KeyedLocks
from .model import DayRecord, EmployeeLedger, PunchEvent
from .repository import LedgerRepository

logger = logging.getLogger(__name__)


class LedgerService:
    """Use case: record one punch into an employee's banco de horas.

    Each call is load -> append -> recompute -> save under the employee's lock.
    Ledgers are immutable values, so when validation or the save fails the
    previously stored document and any ledger the caller holds stay as they were.
    """

    def __init__(
        self,
        ledgers: LedgerRepository,
        *,
        accumulator: Optional[DayAccumulator] = None,
        locks: Optional[KeyedLocks] = None,
        validate_calendar_dates: bool = False,
    ):
        self._ledgers = ledgers
        self._accumulator = accumulator or DayAccumulator()
        self._locks = locks or KeyedLocks()
        self._validate_calendar_dates = bool(validate_calendar_dates)

    def record_punch(self, event: PunchEvent) -> EmployeeLedger:
        employee_id = require_non_empty(event.employee_id, "ID do colaborador")
        work_date = require_iso_date(event.date, "Data", validate_calendar=self._validate_calendar_dates)
        punch_time = require_clock(event.time, "Hora")

        with self._locks.hold(employee_id):
            ledger = self._ledgers.load(employee_id)
            if ledger is None:
                ledger = EmployeeLedger(
                    employee_id=employee_id,
                    employee_name=event.employee_name or "",
                    tax_id=event.tax_id or "",
                )
                logger.info("Creating ledger for employee %s", employee_id)
            else:
                ledger = ledger.with_identity(employee_name=event.employee_name, tax_id=event.tax_id)

            day = ledger.find_day(work_date) or DayRecord(date=work_date)
            day = self._accumulator.recompute(day.with_punch(punch_time))
            ledger = ledger.with_day(day)

            self._ledgers.save(ledger)

        logger.info(
            "Recorded punch %s %s for employee %s (%d punches that day)",
            work_date,
            punch_time,
            employee_id,
            len(day.punches),
        )
        return ledger

    def record_extracted(self, extracted: ExtractedPunch) -> EmployeeLedger:
        event = extracted.to_event(validate_calendar=self._validate_calendar_dates)
        return self.record_punch(event)

    def get_ledger(self, employee_id: str) -> Optional[EmployeeLedger]:
        employee_id = require_non_empty(employee_id, "ID do colaborador")
        return self._ledgers.load(employee_id)
