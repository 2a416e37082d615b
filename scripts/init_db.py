from __future__ import annotations

import importlib
import logging

from chronolog.config import get_settings_module
from chronolog.database.bootstrap import apply_schema, list_tables
from chronolog.database.connection import DBConfig
from chronolog.main import SCHEMA_PATH

logger = logging.getLogger("chronolog.scripts.init_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(config, schema_path=SCHEMA_PATH)
    tables = list_tables(config)
    logger.info("OK: Applied schema.sql -> %s (tables=%d)", config.describe(), len(tables))


if __name__ == "__main__":
    main()
