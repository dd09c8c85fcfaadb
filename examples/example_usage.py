"""Exemplo: usar a camada de serviço direto (sem Flask).

Controllers são só uma casca fina; a regra do banco de horas vive em LedgerService.
"""

import importlib
import json

from config import get_settings_module

from src.timebank.timebank.container import build_container
from src.timebank.timebank.ledger.model import PunchEvent


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(ledger_config=settings.LEDGER_CONFIG)

    for hora in ("08:00:00", "12:00:00", "18:00:00"):
        ledger = container.ledger_service.record_punch(
            PunchEvent(employee_id="1", employee_name="Maria Souza", tax_id="12345678901", date="2024-03-05", time=hora)
        )
    print(json.dumps(ledger.to_document(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
