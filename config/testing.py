SECRET_KEY = "test-secret"

LEDGER_CONFIG = {
    "backend": "memory",
    "directory": None,
    "standard_workday_minutes": 440,
    "lunch_break_minutes": 60,
    "duration_policy": "accept",
    "validate_calendar_dates": False,
}

UPLOAD_MAX_BYTES = 1024 * 1024

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
