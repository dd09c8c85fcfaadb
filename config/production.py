import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

LEDGER_CONFIG = {
    "backend": os.getenv("LEDGER_BACKEND", "json"),
    "directory": os.getenv("LEDGER_DIR", "/var/lib/timebank/dadosHoras"),
    "standard_workday_minutes": int(os.getenv("STANDARD_WORKDAY_MINUTES", "440")),
    "lunch_break_minutes": int(os.getenv("LUNCH_BREAK_MINUTES", "60")),
    "duration_policy": os.getenv("DURATION_POLICY", "accept"),
    "validate_calendar_dates": bool(int(os.getenv("VALIDATE_CALENDAR_DATES", "0"))),
}

UPLOAD_MAX_BYTES = int(os.getenv("UPLOAD_MAX_BYTES", str(10 * 1024 * 1024)))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
