"""Run the API with uvicorn: ``python -m records_api``."""
import logging

import uvicorn

from records_api.core.config import get_settings
from records_api.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    logger.info("Starting Records API on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "records_api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "dev",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
