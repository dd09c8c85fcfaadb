from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.clock import br_date_to_iso
from ..core.exceptions import ExtractionError
from ..ledger.model import PunchEvent


@dataclass(frozen=True)
class ExtractedPunch:
    """Raw fields captured from a document; ``date`` is ``DD/MM/YYYY``."""

    employee_id: Optional[str] = None
    employee_name: Optional[str] = None
    tax_id: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None

    def to_event(self, *, validate_calendar: bool = False) -> PunchEvent:
        if not self.employee_id or not self.date or not self.time:
            raise ExtractionError("Informações obrigatórias não encontradas no PDF.")

        return PunchEvent(
            employee_id=self.employee_id,
            employee_name=self.employee_name,
            tax_id=self.tax_id,
            date=br_date_to_iso(self.date, validate_calendar=validate_calendar),
            time=self.time,
        )
