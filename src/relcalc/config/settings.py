"""Application settings.

All configuration is sourced from environment variables prefixed with
`RELCALC_` (and optionally `.env`).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed environment-backed settings for relcalc."""

    model_config = SettingsConfigDict(
        env_prefix="RELCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None
    log_stdout: bool = False
    log_rotate_bytes: int = Field(default=0, ge=0)
    log_backup_count: int = Field(default=3, ge=0)

    # Storage root for logs; defaults to <repo>/.relcalc
    data_dir: Path | None = None

    # HTTP API
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"
    rate_limit: str = "60 per minute"
    api_host: str = "127.0.0.1"
    api_port: int = 5001

    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
