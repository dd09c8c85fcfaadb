from __future__ import annotations

from enum import Enum


class DurationPolicy(str, Enum):
    """What to do when a day's punches yield a negative worked duration."""

    ACCEPT = "accept"
    CLAMP = "clamp"
    REJECT = "reject"
