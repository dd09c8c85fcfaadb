import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

LEDGER_CONFIG = {
    "backend": os.getenv("LEDGER_BACKEND", "json"),
    "directory": os.getenv("LEDGER_DIR", "json/dadosHoras"),
    # 7h20 de jornada, 1h de almoço
    "standard_workday_minutes": int(os.getenv("STANDARD_WORKDAY_MINUTES", "440")),
    "lunch_break_minutes": int(os.getenv("LUNCH_BREAK_MINUTES", "60")),
    # accept | clamp | reject
    "duration_policy": os.getenv("DURATION_POLICY", "accept"),
    "validate_calendar_dates": bool(int(os.getenv("VALIDATE_CALENDAR_DATES", "0"))),
}

UPLOAD_MAX_BYTES = int(os.getenv("UPLOAD_MAX_BYTES", str(10 * 1024 * 1024)))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
