from __future__ import annotations

import re
from typing import Optional

from .model import ExtractedPunch

# Labels as printed on the time-clock receipt.
FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    "employee_id": re.compile(r"ID:\s*(\d+)"),
    "employee_name": re.compile(r"Nome do colaborador:\s*(.+)"),
    "tax_id": re.compile(r"CPF:\s*(\d+)"),
    "date": re.compile(r"Data:\s*(\d{2}/\d{2}/\d{4})"),
    "time": re.compile(r"Hora:\s*(\d{2}:\d{2}:\d{2})"),
}


def capture(text: str, pattern: re.Pattern[str]) -> Optional[str]:
    m = pattern.search(text or "")
    return m.group(1).strip() if m else None


def extract_punch_fields(text: str) -> ExtractedPunch:
    """Pick the five punch fields out of a document's text; absent ones are ``None``."""
    return ExtractedPunch(**{name: capture(text, pattern) for name, pattern in FIELD_PATTERNS.items()})
