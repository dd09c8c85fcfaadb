"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# 7h20 workday, 1h lunch
DEFAULT_STANDARD_WORKDAY_MINUTES = 7 * 60 + 20
DEFAULT_LUNCH_BREAK_MINUTES = 60

DEFAULT_LEDGER_DIR = "json/dadosHoras"
DEFAULT_UPLOAD_MAX_BYTES = 10 * 1024 * 1024
