from __future__ import annotations

from typing import Optional, Protocol

from .model import EmployeeLedger


class LedgerRepository(Protocol):
    """Whole-document store: one ledger per employee id."""

    def load(self, employee_id: str) -> Optional[EmployeeLedger]:
        raise NotImplementedError

    def save(self, ledger: EmployeeLedger) -> None:
        """Overwrite the stored document; raises StorageError on failure."""

        raise NotImplementedError
