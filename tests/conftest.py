from __future__ import annotations

import pytest

from src.timebank.timebank.ledger.accumulator import DayAccumulator, WorkdayConfig
from src.timebank.timebank.ledger.memory_ledger_repository import InMemoryLedgerRepository
from src.timebank.timebank.ledger.service import LedgerService


@pytest.fixture
def workday() -> WorkdayConfig:
    return WorkdayConfig(standard_workday_minutes=440, lunch_break_minutes=60)


@pytest.fixture
def ledgers_repo() -> InMemoryLedgerRepository:
    return InMemoryLedgerRepository()


@pytest.fixture
def ledger_service(ledgers_repo, workday) -> LedgerService:
    return LedgerService(ledgers_repo, accumulator=DayAccumulator(workday))
