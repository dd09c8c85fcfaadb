from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from ..common.clock import format_minutes, parse_duration
from ..common.validators import require_clock


@dataclass(frozen=True)
class PunchEvent:
    """Uma marcação extraída, pronta para entrar no banco de horas.

    ``date`` is ISO ``YYYY-MM-DD`` and ``time`` is ``HH:MM:SS``. Every field is
    optional here because extraction may hand over partial data; the service
    validates before touching any ledger.
    """

    employee_id: Optional[str] = None
    employee_name: Optional[str] = None
    tax_id: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None


@dataclass(frozen=True)
class DayRecord:
    """One calendar day of an employee's ledger.

    ``punches`` keeps insertion order. The summary fields are derived by
    :class:`~.accumulator.DayAccumulator` and stay ``None`` until the day has
    at least two punches.
    """

    date: str
    punches: tuple[str, ...] = ()
    entrada: Optional[str] = None
    saida: Optional[str] = None
    worked_minutes: Optional[int] = None
    overtime_minutes: Optional[int] = None

    def with_punch(self, punch_time: str) -> "DayRecord":
        return replace(self, punches=self.punches + (punch_time,))

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"data": self.date, "marcacoes": list(self.punches)}
        if self.entrada is not None:
            doc["entrada"] = self.entrada
        if self.saida is not None:
            doc["saida"] = self.saida
        if self.worked_minutes is not None:
            doc["horas_trabalhadas"] = format_minutes(self.worked_minutes)
        if self.overtime_minutes is not None:
            doc["horas_extras"] = format_minutes(self.overtime_minutes)
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "DayRecord":
        worked = doc.get("horas_trabalhadas")
        overtime = doc.get("horas_extras")
        return cls(
            date=str(doc["data"]),
            punches=tuple(require_clock(str(p), "Marcação") for p in doc.get("marcacoes") or ()),
            entrada=doc.get("entrada"),
            saida=doc.get("saida"),
            worked_minutes=parse_duration(worked) if worked is not None else None,
            overtime_minutes=parse_duration(overtime) if overtime is not None else None,
        )


@dataclass(frozen=True)
class EmployeeLedger:
    """Banco de horas de um colaborador: identity plus days in first-seen order."""

    employee_id: str
    employee_name: str = ""
    tax_id: str = ""
    days: tuple[DayRecord, ...] = ()

    def find_day(self, work_date: str) -> Optional[DayRecord]:
        for day in self.days:
            if day.date == work_date:
                return day
        return None

    def with_day(self, day: DayRecord) -> "EmployeeLedger":
        """Replace the day with the same date, or append it as a new day."""
        days = list(self.days)
        for i, existing in enumerate(days):
            if existing.date == day.date:
                days[i] = day
                break
        else:
            days.append(day)
        return replace(self, days=tuple(days))

    def with_identity(self, *, employee_name: Optional[str], tax_id: Optional[str]) -> "EmployeeLedger":
        """Fill blank name/tax id from a newer punch; stored values always win."""
        return replace(
            self,
            employee_name=self.employee_name or (employee_name or ""),
            tax_id=self.tax_id or (tax_id or ""),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "id": self.employee_id,
            "colaborador": self.employee_name,
            "cpf": self.tax_id,
            "dias": [d.to_document() for d in self.days],
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "EmployeeLedger":
        return cls(
            employee_id=str(doc["id"]),
            employee_name=doc.get("colaborador") or "",
            tax_id=doc.get("cpf") or "",
            days=tuple(DayRecord.from_document(d) for d in doc.get("dias") or ()),
        )
