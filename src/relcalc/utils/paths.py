"""Shared filesystem paths."""

from __future__ import annotations

from pathlib import Path

from ..config import get_settings


def repo_root() -> Path:
    return Path(__file__).resolve().parents[3]


def relcalc_data_dir(repo_root_path: Path | None = None) -> Path:
    configured = get_settings().data_dir
    if configured is not None:
        path = configured
        if not path.is_absolute():
            base = repo_root_path or repo_root()
            path = (base / path).resolve()
        return path
    base = repo_root_path or repo_root()
    return base / ".relcalc"
