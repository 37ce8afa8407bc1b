"""
Logging setup for the GEDCOM validator.

All loggers hang off the ``gedcom_validator`` base logger, which owns two
handlers: the master log file (``logs/gedcom_validator.log`` by default,
optionally rotated) and a console handler for warnings. The ``debug`` flag in
``config/gedcom_validator.yml``, or ``set_debug(True)`` at runtime, lowers
both to DEBUG.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from gedcom_validator.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_validator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_level: int = logging.INFO
_configured: bool = False


def _log_file() -> Path:
    cfg = get_config()
    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / cfg.logging.get("file", "gedcom_validator.log")


def _file_handler(path: Path, rotate: bool) -> logging.Handler:
    if rotate:
        return RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8")
    return logging.FileHandler(path, encoding="utf-8")


def _base_logger() -> Logger:
    """Attach the master file and console handlers once."""
    global _base_level, _configured

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _configured:
        return base

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _base_level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    master = _file_handler(_log_file(), bool(cfg.logging.get("rotate", False)))
    master.setFormatter(formatter)
    console = StreamHandler()
    console.setFormatter(formatter)

    base.addHandler(master)
    base.addHandler(console)
    base.propagate = False
    _configured = True

    set_debug(bool(cfg.debug))
    return base


def set_debug(enabled: bool) -> None:
    """Switch the base logger and its handlers between DEBUG and the configured level."""
    base = _base_logger()
    file_level = logging.DEBUG if enabled else _base_level
    base.setLevel(file_level)
    for handler in base.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.setLevel(file_level)
        else:
            handler.setLevel(logging.DEBUG if enabled else logging.WARNING)


def get_logger(name: str | None = None) -> Logger:
    """
    Return ``gedcom_validator.<name>``; module loggers carry no level or
    handlers of their own and propagate to the base logger.
    """
    base = _base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = base if logger_name == BASE_LOGGER_NAME else logging.getLogger(logger_name)
    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
