"""
Logging for the ``code_camp_api`` package.

``configure_logging`` applies ``Settings.log_level`` to the package
logger and gives it a console handler plus, when ``Settings.log_file``
is set, a file handler.  The root logger is left alone so that uvicorn
and pytest keep their own configuration; records still propagate to it.

Calling it again (one call per ``create_app``) replaces the handlers it
installed earlier instead of stacking new ones.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "code_camp_api"
CONSOLE_HANDLER = "code_camp_api.console"
FILE_HANDLER = "code_camp_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure and return the package logger for ``settings``.

    Unknown level names fall back to ``INFO``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_level(settings.log_level))

    for handler in list(logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
