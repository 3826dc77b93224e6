"""
Console logging for applications embedding LocalStore.
"""

import logging

from ..config.settings import Settings

LOG_FORMAT  = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a console handler to the ``LocalStore`` logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(Settings.APP_NAME)
    logger.setLevel(level or Settings.LOG_LEVEL)

    if not any(getattr(h, "_localstore", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(
            LOG_FORMAT, datefmt=DATE_FORMAT,
        ))
        console_handler._localstore = True
        logger.addHandler(console_handler)

    return logger
