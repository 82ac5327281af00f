"""Create the records table: ``python -m records_api.db.create_tables``."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from records_api.core.config import get_settings
from records_api.core.logging_config import setup_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # registers RecordRow on Base.metadata

logger = logging.getLogger(__name__)


def create_all() -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    try:
        create_all()
    except (SQLAlchemyError, RuntimeError) as exc:
        logger.error("Failed to create tables on %s: %s", settings.database_url, exc)
        return 1
    logger.info("Tables created on %s", settings.database_url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
