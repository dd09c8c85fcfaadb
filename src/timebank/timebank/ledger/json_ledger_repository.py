from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..core.exceptions import StorageError, ValidationError
from .model import EmployeeLedger
from .repository import LedgerRepository

logger = logging.getLogger(__name__)

_SAFE_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@contextmanager
def atomic_write(path: Path) -> Iterator:
    """Write to a temp file beside ``path`` and move it into place on success."""
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            yield fh
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class JsonLedgerRepository(LedgerRepository):
    """Ledger documents as ``<directory>/<employee_id>.json``."""

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def _path_for(self, employee_id: str) -> Path:
        if not _SAFE_ID_RE.match(employee_id or ""):
            raise ValidationError(f"ID do colaborador inválido: {employee_id!r}")
        return self._directory / f"{employee_id}.json"

    def load(self, employee_id: str) -> Optional[EmployeeLedger]:
        path = self._path_for(employee_id)
        if not path.exists():
            return None

        try:
            doc = json.loads(path.read_text(encoding="utf-8"))
            return EmployeeLedger.from_document(doc)
        except OSError as e:
            raise StorageError(f"Falha ao ler {path}: {e}") from e
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            raise StorageError(f"Documento corrompido {path}: {e}") from e

    def save(self, ledger: EmployeeLedger) -> None:
        path = self._path_for(ledger.employee_id)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with atomic_write(path) as fh:
                json.dump(ledger.to_document(), fh, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StorageError(f"Falha ao gravar {path}: {e}") from e
        logger.debug("Saved ledger %s (%d days) to %s", ledger.employee_id, len(ledger.days), path)
