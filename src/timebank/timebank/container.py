from __future__ import annotations

from dataclasses import dataclass

from .core.constants import (
    DEFAULT_LEDGER_DIR,
    DEFAULT_LUNCH_BREAK_MINUTES,
    DEFAULT_STANDARD_WORKDAY_MINUTES,
)
from .extraction.service import DocumentExtractor
from .ledger.accumulator import DayAccumulator, WorkdayConfig
from .ledger.factory import DurationStrategyFactory
from .ledger.json_ledger_repository import JsonLedgerRepository
from .ledger.locking import KeyedLocks
from .ledger.memory_ledger_repository import InMemoryLedgerRepository
from .ledger.repository import LedgerRepository
from .ledger.service import LedgerService


@dataclass(frozen=True)
class Container:
    ledgers_repo: LedgerRepository
    locks: KeyedLocks
    accumulator: DayAccumulator

    ledger_service: LedgerService
    extractor: DocumentExtractor


def build_container(*, ledger_config: dict) -> Container:
    backend = str(ledger_config.get("backend", "json")).lower()
    if backend == "memory":
        ledgers_repo: LedgerRepository = InMemoryLedgerRepository()
    else:
        ledgers_repo = JsonLedgerRepository(ledger_config.get("directory", DEFAULT_LEDGER_DIR))

    workday = WorkdayConfig(
        standard_workday_minutes=int(ledger_config.get("standard_workday_minutes", DEFAULT_STANDARD_WORKDAY_MINUTES)),
        lunch_break_minutes=int(ledger_config.get("lunch_break_minutes", DEFAULT_LUNCH_BREAK_MINUTES)),
    )
    strategy = DurationStrategyFactory().for_policy(ledger_config.get("duration_policy", "accept"))
    accumulator = DayAccumulator(workday, strategy=strategy)
    locks = KeyedLocks()

    ledger_service = LedgerService(
        ledgers_repo,
        accumulator=accumulator,
        locks=locks,
        validate_calendar_dates=bool(ledger_config.get("validate_calendar_dates", False)),
    )

    return Container(
        ledgers_repo=ledgers_repo,
        locks=locks,
        accumulator=accumulator,
        ledger_service=ledger_service,
        extractor=DocumentExtractor(),
    )
