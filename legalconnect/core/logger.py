"""
Shared application logger.
"""

import logging
import sys

from legalconnect.core.config import get_settings

LOGGER_NAME = "legalconnect"


def setup_logger() -> logging.Logger:
    """Configure the application logger once and return it."""
    settings = get_settings()
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        log.addHandler(handler)
    log.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    return log


logger = setup_logger()
