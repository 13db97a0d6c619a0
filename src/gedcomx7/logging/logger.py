"""
Logging setup for gedcomx7.

Every module logs through ``get_logger(__name__)``. Loggers hang under the
``gedcomx7`` base logger, which writes to stderr so converted documents on
stdout stay clean. With ``logging.to_file`` set, records also go to
``<logs_dir>/gedcomx7.log`` and to one file per module.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedcomx7.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcomx7"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_logger_cache: Dict[str, Logger] = {}
_settings: Optional["LogSettings"] = None


@dataclass(frozen=True)
class LogSettings:
    level: int
    to_file: bool
    rotate: bool
    log_dir: Path
    master_file: str

    @classmethod
    def from_config(cls, cfg) -> "LogSettings":
        level_name = str(cfg.logging.get("level", "INFO")).upper()
        level = logging.DEBUG if cfg.debug else getattr(logging, level_name, logging.INFO)

        log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        return cls(
            level=level,
            to_file=bool(cfg.logging.get("to_file", False)),
            rotate=bool(cfg.logging.get("rotate", False)),
            log_dir=log_dir,
            master_file=cfg.logging.get("file", "gedcomx7.log"),
        )


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename
    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _base_logger() -> Logger:
    """Configure the ``gedcomx7`` logger on first use."""
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    _settings = LogSettings.from_config(get_config())
    base.setLevel(_settings.level)
    base.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(_settings.level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    if _settings.to_file:
        base.addHandler(_file_handler(_settings, _settings.master_file))

    _logger_cache[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: str | None = None) -> Logger:
    """Return ``gedcomx7.<name>``, configured on the shared base logger.

    Module loggers propagate to the base logger; with ``logging.to_file``
    they also get their own ``<module>.log``.
    """
    base = _base_logger()
    if not name or name == BASE_LOGGER_NAME:
        return base

    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"

    logger = _logger_cache.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        logger.setLevel(_settings.level)
        logger.propagate = True
        if _settings.to_file:
            logger.addHandler(_file_handler(_settings, f"{name.replace('.', '_')}.log"))
        _logger_cache[name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out so far (useful when debugging handler setup)."""
    return list(_logger_cache.keys())
