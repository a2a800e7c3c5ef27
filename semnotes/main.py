"""Main entry point for the Semnotes HTTP server."""

import logging
import sys

import uvicorn

from semnotes.api import create_app
from semnotes.config import get_settings
from semnotes.logging_setup import setup_logging


def main() -> None:
    """Run the Semnotes server."""
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
    except Exception as e:
        logger.error(f"Failed to load settings: {e}")
        logger.error("Make sure you have a .env file with NOTES_DIRECTORY set.")
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    logger.info(f"Notes directory: {settings.notes_directory}")
    logger.info(f"Database: {settings.database_url}")

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
