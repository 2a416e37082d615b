from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.datetime_utils import Clock
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(*, settings_module: str | None = None, clock: Clock | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    storage_backend = str(getattr(settings, "STORAGE_BACKEND", "mysql"))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("settings=%s storage=%s", settings_module, storage_backend)

    if storage_backend == "mysql":
        config = DBConfig.from_dict(db_config)
        logger.info("db=%s", config.describe())
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(config)))

    container = build_container(db_config=db_config, storage_backend=storage_backend, clock=clock)
    app.extensions["chronolog"] = container

    register_attendance(app, container)

    return app
