from __future__ import annotations

import threading
import time

import pytest

from src.timebank.timebank.core.exceptions import StorageError, ValidationError
from src.timebank.timebank.extraction.model import ExtractedPunch
from src.timebank.timebank.ledger.accumulator import DayAccumulator
from src.timebank.timebank.ledger.json_ledger_repository import JsonLedgerRepository
from src.timebank.timebank.ledger.memory_ledger_repository import InMemoryLedgerRepository
from src.timebank.timebank.ledger.model import PunchEvent
from src.timebank.timebank.ledger.policies.reject_policy import RejectStrategy
from src.timebank.timebank.ledger.service import LedgerService


def _punch(t, *, date="2024-03-05", employee_id="123", name="Maria Souza", cpf="12345678901"):
    return PunchEvent(employee_id=employee_id, employee_name=name, tax_id=cpf, date=date, time=t)


class FailingSaveRepository(InMemoryLedgerRepository):
    def __init__(self, documents=None):
        super().__init__(documents)
        self.fail = False

    def save(self, ledger) -> None:
        if self.fail:
            raise StorageError("disk full")
        super().save(ledger)


class SlowRepository(InMemoryLedgerRepository):
    """Widens the load/save window so unserialized writers would lose punches."""

    def load(self, employee_id):
        ledger = super().load(employee_id)
        time.sleep(0.005)
        return ledger


def test_first_punch_creates_seeded_ledger(ledger_service, ledgers_repo):
    ledger = ledger_service.record_punch(_punch("08:00:00"))

    assert ledger.employee_id == "123"
    assert ledger.employee_name == "Maria Souza"
    assert ledger.tax_id == "12345678901"
    assert ledgers_repo.document("123") == {
        "id": "123",
        "colaborador": "Maria Souza",
        "cpf": "12345678901",
        "dias": [{"data": "2024-03-05", "marcacoes": ["08:00:00"]}],
    }


def test_missing_name_and_cpf_seed_empty_strings(ledger_service):
    ledger = ledger_service.record_punch(_punch("08:00:00", name=None, cpf=None))

    assert ledger.employee_name == ""
    assert ledger.tax_id == ""


def test_later_punch_with_empty_name_keeps_stored_name(ledger_service):
    ledger_service.record_punch(_punch("08:00:00"))
    ledger = ledger_service.record_punch(_punch("17:00:00", name="", cpf=None))

    assert ledger.employee_name == "Maria Souza"
    assert ledger.tax_id == "12345678901"


def test_blank_stored_name_is_filled_by_later_punch(ledger_service):
    ledger_service.record_punch(_punch("08:00:00", name=None))
    ledger = ledger_service.record_punch(_punch("17:00:00", name="Maria Souza"))

    assert ledger.employee_name == "Maria Souza"


def test_entrada_and_saida_follow_first_and_latest_punch(ledger_service):
    times = ["08:00:00", "12:00:00", "13:00:00", "18:00:00"]
    for i, t in enumerate(times, start=1):
        day = ledger_service.record_punch(_punch(t)).find_day("2024-03-05")
        assert len(day.punches) == i
        if i >= 2:
            assert day.entrada == "08:00:00"
            assert day.saida == t
            assert day.worked_minutes is not None
        else:
            assert day.worked_minutes is None

    assert day.overtime_minutes == 100


def test_summary_is_recomputed_on_every_punch(ledger_service):
    ledger_service.record_punch(_punch("08:00:00"))
    first = ledger_service.record_punch(_punch("16:00:00")).find_day("2024-03-05")
    second = ledger_service.record_punch(_punch("18:00:00")).find_day("2024-03-05")

    assert first.worked_minutes == 420
    assert second.worked_minutes == 540


def test_duplicate_punches_are_kept(ledger_service):
    ledger_service.record_punch(_punch("08:00:00"))
    day = ledger_service.record_punch(_punch("08:00:00")).find_day("2024-03-05")

    assert day.punches == ("08:00:00", "08:00:00")
    assert day.worked_minutes == -60


def test_days_keep_first_seen_order(ledger_service):
    ledger_service.record_punch(_punch("08:00:00", date="2024-03-07"))
    ledger_service.record_punch(_punch("08:00:00", date="2024-03-05"))
    ledger = ledger_service.record_punch(_punch("17:00:00", date="2024-03-07"))

    assert [d.date for d in ledger.days] == ["2024-03-07", "2024-03-05"]
    assert ledger.days[0].punches == ("08:00:00", "17:00:00")


def test_employees_have_separate_ledgers(ledger_service, ledgers_repo):
    ledger_service.record_punch(_punch("08:00:00", employee_id="1"))
    ledger_service.record_punch(_punch("09:00:00", employee_id="2"))

    assert ledgers_repo.document("1")["dias"][0]["marcacoes"] == ["08:00:00"]
    assert ledgers_repo.document("2")["dias"][0]["marcacoes"] == ["09:00:00"]


@pytest.mark.parametrize(
    "event",
    [
        PunchEvent(employee_id="123", date=None, time="08:00:00"),
        PunchEvent(employee_id="", date="2024-03-05", time="08:00:00"),
        PunchEvent(employee_id="123", date="05/03/2024", time="08:00:00"),
        PunchEvent(employee_id="123", date="2024-03-05", time="8h"),
    ],
)
def test_invalid_event_raises_before_touching_store(event, ledger_service, ledgers_repo):
    with pytest.raises(ValidationError):
        ledger_service.record_punch(event)

    assert ledgers_repo.document("123") is None


def test_missing_date_leaves_json_document_byte_for_byte(tmp_path, workday):
    repo = JsonLedgerRepository(tmp_path)
    svc = LedgerService(repo, accumulator=DayAccumulator(workday))
    svc.record_punch(_punch("08:00:00"))
    before = (tmp_path / "123.json").read_bytes()

    with pytest.raises(ValidationError):
        svc.record_punch(PunchEvent(employee_id="123", employee_name="Outro", time="17:00:00"))

    assert (tmp_path / "123.json").read_bytes() == before


def test_failed_save_propagates_and_keeps_previous_document(workday):
    repo = FailingSaveRepository()
    svc = LedgerService(repo, accumulator=DayAccumulator(workday))
    held = svc.record_punch(_punch("08:00:00"))
    before = repo.document("123")

    repo.fail = True
    with pytest.raises(StorageError):
        svc.record_punch(_punch("17:00:00"))

    assert repo.document("123") == before
    assert held.find_day("2024-03-05").punches == ("08:00:00",)

    repo.fail = False
    day = svc.record_punch(_punch("17:00:00")).find_day("2024-03-05")
    assert day.punches == ("08:00:00", "17:00:00")


def test_reject_policy_refuses_inverted_punch_without_saving(ledgers_repo, workday):
    svc = LedgerService(ledgers_repo, accumulator=DayAccumulator(workday, strategy=RejectStrategy()))
    svc.record_punch(_punch("17:00:00"))
    before = ledgers_repo.document("123")

    with pytest.raises(ValidationError):
        svc.record_punch(_punch("08:00:00"))

    assert ledgers_repo.document("123") == before


def test_reject_policy_accepts_short_day_in_order(ledgers_repo, workday):
    svc = LedgerService(ledgers_repo, accumulator=DayAccumulator(workday, strategy=RejectStrategy()))
    svc.record_punch(_punch("08:00:00"))
    day = svc.record_punch(_punch("08:40:00")).find_day("2024-03-05")

    assert day.punches == ("08:00:00", "08:40:00")
    assert ledgers_repo.document("123")["dias"][0]["marcacoes"] == ["08:00:00", "08:40:00"]


def test_reject_policy_refuses_punch_before_current_saida(ledgers_repo, workday):
    svc = LedgerService(ledgers_repo, accumulator=DayAccumulator(workday, strategy=RejectStrategy()))
    svc.record_punch(_punch("08:00:00"))
    svc.record_punch(_punch("18:00:00"))
    before = ledgers_repo.document("123")

    with pytest.raises(ValidationError):
        svc.record_punch(_punch("12:00:00"))
    with pytest.raises(ValidationError):
        svc.record_punch(_punch("18:00:00"))

    assert ledgers_repo.document("123") == before
    assert before["dias"][0]["horas_trabalhadas"] == "09:00"


def test_calendar_validation_is_opt_in(ledgers_repo, workday):
    lenient = LedgerService(ledgers_repo, accumulator=DayAccumulator(workday))
    strict = LedgerService(ledgers_repo, accumulator=DayAccumulator(workday), validate_calendar_dates=True)

    lenient.record_punch(_punch("08:00:00", date="2024-02-31"))
    with pytest.raises(ValidationError):
        strict.record_punch(_punch("08:00:00", date="2024-02-31"))


def test_record_extracted_converts_brazilian_date(ledger_service):
    extracted = ExtractedPunch(
        employee_id="77",
        employee_name="João Lima",
        tax_id="98765432100",
        date="05/03/2024",
        time="08:00:00",
    )

    ledger = ledger_service.record_extracted(extracted)

    assert ledger.days[0].date == "2024-03-05"


def test_concurrent_punches_for_same_employee_are_all_kept(workday):
    repo = SlowRepository()
    svc = LedgerService(repo, accumulator=DayAccumulator(workday))
    times = [f"{8 + i:02d}:00:00" for i in range(8)]

    threads = [threading.Thread(target=svc.record_punch, args=(_punch(t),)) for t in times]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    punches = repo.document("123")["dias"][0]["marcacoes"]
    assert sorted(punches) == times


def test_get_ledger_returns_none_for_unknown_employee(ledger_service):
    assert ledger_service.get_ledger("999") is None
    ledger_service.record_punch(_punch("08:00:00", employee_id="999"))
    assert ledger_service.get_ledger("999").employee_id == "999"
