"""
Notes API — Server Entry Point
================================

What:  Loads settings, builds the app and runs it under uvicorn.
Who:   The `notes-api` console script and `python -m notes_api`.

A failure to bind the listening port is fatal: uvicorn logs it and exits.
"""

import logging
import sys

import uvicorn

from notes_api.config import load_settings
from notes_api.exceptions import ConfigurationError
from notes_api.main import create_app, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error("%s", e.message)
        logger.error("Fix the configuration and restart the server.")
        sys.exit(1)

    setup_logging(settings.log_level)
    app = create_app(settings)

    # log_config=None keeps uvicorn from replacing the handlers set up above.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
