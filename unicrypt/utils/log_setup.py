"""
Console logging for scripts that drive UniCrypt.

The library only creates ``UniCrypt.*`` loggers; attaching handlers is
left to the host application.  ``setup_logging`` is the small helper
the bundled scripts use.
"""

import logging

from ..config import Settings

_HANDLER_NAME = "unicrypt-console"


def setup_logging(level: str | int = Settings.LOG_LEVEL) -> logging.Logger:
    """Attach a console handler to the ``UniCrypt`` logger (idempotent)."""
    logger = logging.getLogger(Settings.APP_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return logger

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT,
        datefmt=Settings.LOG_DATEFMT,
    ))
    logger.addHandler(console_handler)
    return logger
