"""Clock-string arithmetic.

Punch times are naive local ``HH:MM[:SS]`` strings. Durations are whole
minutes; seconds are accepted on input and dropped.
"""
from __future__ import annotations

import re
from datetime import datetime

from ..core.exceptions import ValidationError

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")
_DURATION_RE = re.compile(r"^(-)?(\d+):(\d{2})$")
# Older ledgers wrote negatives as floor(hours):remainder, e.g. -1:-30 for -30 min.
_LEGACY_NEGATIVE_RE = re.compile(r"^(-\d+):(-\d{1,2})$")
_BR_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


def parse_clock(value: str) -> tuple[int, int]:
    """Parse ``HH:MM[:SS]`` into ``(hours, minutes)``."""
    m = _CLOCK_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Horário inválido: {value!r}")

    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValidationError(f"Horário inválido: {value!r}")
    return hours, minutes


def minutes_of(value: str) -> int:
    hours, minutes = parse_clock(value)
    return hours * 60 + minutes


def diff_minutes(start: str, end: str) -> int:
    """Minutes from ``start`` to ``end``; negative when ``end`` is earlier."""
    return minutes_of(end) - minutes_of(start)


def format_minutes(minutes: int) -> str:
    """Render minutes as ``HH:MM``; negatives as ``-HH:MM``."""
    minutes = int(minutes)
    sign = "-" if minutes < 0 else ""
    minutes = abs(minutes)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def parse_duration(value: str) -> int:
    """Inverse of :func:`format_minutes`; also reads the legacy ``-H:-MM`` form."""
    value = (value or "").strip()
    legacy = _LEGACY_NEGATIVE_RE.match(value)
    if legacy:
        return (int(legacy.group(1)) + 1) * 60 + int(legacy.group(2))

    m = _DURATION_RE.match(value)
    if not m:
        raise ValidationError(f"Duração inválida: {value!r}")
    total = int(m.group(2)) * 60 + int(m.group(3))
    return -total if m.group(1) else total


def br_date_to_iso(value: str, *, validate_calendar: bool = False) -> str:
    """Rearrange ``DD/MM/YYYY`` into ``YYYY-MM-DD``.

    Only the shape is checked unless ``validate_calendar`` is set, so values
    like ``31/02/2024`` pass through.
    """
    m = _BR_DATE_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Data inválida: {value!r}")

    day, month, year = m.groups()
    iso = f"{year}-{month}-{day}"
    if validate_calendar:
        try:
            datetime.strptime(iso, "%Y-%m-%d")
        except ValueError as e:
            raise ValidationError(f"Data inexistente: {value!r}") from e
    return iso
