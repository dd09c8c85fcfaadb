"""Ingest punch receipts from disk.

Usage: python -m scripts.ingest_pdfs <file-or-directory> [...]

Each PDF goes through the same path as POST /upload-ponto. Failures are
reported per file and do not stop the run.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from src.timebank.timebank.container import build_container
from src.timebank.timebank.core.exceptions import DomainError

logger = logging.getLogger("scripts.ingest_pdfs")


def _iter_pdfs(paths: list[str]):
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            yield from sorted(path.glob("*.pdf"))
        else:
            yield path


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        raise SystemExit(__doc__)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(ledger_config=settings.LEDGER_CONFIG)

    failures = 0
    for pdf in _iter_pdfs(argv):
        try:
            extracted = container.extractor.extract(pdf.read_bytes())
            ledger = container.ledger_service.record_extracted(extracted)
        except (DomainError, OSError) as e:
            failures += 1
            logger.error("%s: %s", pdf, e)
            continue
        print(f"OK: {pdf.name} -> colaborador {ledger.employee_id} ({len(ledger.days)} dias)")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
