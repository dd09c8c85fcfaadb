from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError
from .clock import parse_clock

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} não informado")
    return value.strip()


def require_iso_date(value: Optional[str], field_name: str, *, validate_calendar: bool = False) -> str:
    value = require_non_empty(value, field_name)
    if not _ISO_DATE_RE.match(value):
        raise ValidationError(f"{field_name} deve estar no formato AAAA-MM-DD")
    if validate_calendar:
        try:
            datetime.strptime(value, "%Y-%m-%d")
        except ValueError as e:
            raise ValidationError(f"{field_name} inexistente: {value}") from e
    return value


def require_clock(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    parse_clock(value)
    return value
