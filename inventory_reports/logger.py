import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional
from . import settings

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _rotating_handler(log_file: str, log_level: int) -> RotatingFileHandler:
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.LOG_DIR / log_file,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    name: Optional[str] = None,
    log_level: Optional[int] = None,
    log_file: str = "app.log",
) -> logging.Logger:
    """
    Attaches a bare console handler and a rotating file handler under
    LOG_DIR to the named logger (the root logger by default), so every
    module's `getLogger(__name__)` output reaches both.

    The level falls back to LOG_LEVEL from the environment. A logger that
    already has handlers is returned untouched.
    """
    if log_level is None:
        log_level = logging.getLevelName(settings.LOG_LEVEL)
        if not isinstance(log_level, int):
            log_level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    logger.addHandler(_rotating_handler(log_file, log_level))
    return logger
