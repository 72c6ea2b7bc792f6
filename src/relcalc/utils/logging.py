"""Logging helpers for relcalc."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import get_settings
from .paths import relcalc_data_dir

_CONFIGURED = False


def setup_logging(log_path: Optional[Path] = None, *, console: Optional[bool] = None) -> Path:
    """Configure file logging (and optionally stderr) for the root logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return _resolve_log_path(log_path)

    settings = get_settings()
    resolved = _resolve_log_path(log_path)
    resolved.parent.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    root_handler = _build_handler(
        resolved,
        rotate_bytes=settings.log_rotate_bytes,
        backup_count=settings.log_backup_count,
    )
    root_handler.setFormatter(formatter)

    api_handler = _build_handler(
        resolved.parent / "api.log",
        rotate_bytes=settings.log_rotate_bytes,
        backup_count=settings.log_backup_count,
    )
    api_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(root_handler)
    if console if console is not None else settings.log_stdout:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    _attach_logger("relcalc.api", level, api_handler)

    _CONFIGURED = True
    logging.getLogger(__name__).info("Logging initialized: %s", resolved)
    return resolved


def _resolve_log_path(log_path: Optional[Path]) -> Path:
    if log_path is not None:
        return log_path
    configured = get_settings().log_file
    if configured is not None:
        return configured
    return relcalc_data_dir() / "logs" / "relcalc.log"


def _attach_logger(name: str, level: int, handler: logging.Handler) -> None:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False


def _build_handler(path: Path, *, rotate_bytes: int, backup_count: int) -> logging.Handler:
    if rotate_bytes > 0:
        return RotatingFileHandler(
            path,
            maxBytes=rotate_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(
        path,
        encoding="utf-8",
    )
