from __future__ import annotations

import copy
from typing import Any, Optional

from .model import EmployeeLedger
from .repository import LedgerRepository


class InMemoryLedgerRepository(LedgerRepository):
    """Keeps serialized documents in a dict, so loads never share state with saves."""

    def __init__(self, documents: Optional[dict[str, dict[str, Any]]] = None):
        self._documents: dict[str, dict[str, Any]] = copy.deepcopy(documents or {})

    def load(self, employee_id: str) -> Optional[EmployeeLedger]:
        doc = self._documents.get(employee_id)
        if doc is None:
            return None
        return EmployeeLedger.from_document(doc)

    def save(self, ledger: EmployeeLedger) -> None:
        self._documents[ledger.employee_id] = ledger.to_document()

    def document(self, employee_id: str) -> Optional[dict[str, Any]]:
        doc = self._documents.get(employee_id)
        return copy.deepcopy(doc) if doc is not None else None
