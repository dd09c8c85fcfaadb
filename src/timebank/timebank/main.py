from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_UPLOAD_MAX_BYTES
from .ledger.controller import register as register_ledger

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    ledger_config = getattr(settings, "LEDGER_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "UPLOAD_MAX_BYTES", DEFAULT_UPLOAD_MAX_BYTES))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s backend=%s dir=%s policy=%s",
        settings_module,
        ledger_config.get("backend"),
        ledger_config.get("directory"),
        ledger_config.get("duration_policy"),
    )

    container = container or build_container(ledger_config=ledger_config)
    app.extensions["timebank"] = container

    register_ledger(app, container)

    return app
