# textcrypt/util/logger.py
import logging

LOGGER_NAME = "textcrypt"

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``textcrypt.TextCipher``."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return _logger.getChild(name)


def log(message: str, level: int = logging.INFO) -> None:
    """Log ``message`` on the package logger."""
    _logger.log(level, message)
