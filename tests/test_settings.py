"""Tests for settings and logging setup."""

import logging

import pytest

from relcalc.config import Settings, get_settings
from relcalc.utils import logging as relcalc_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RELCALC_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.rate_limit == "60 per minute"
        assert settings.log_rotate_bytes == 0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RELCALC_API_PORT", "8080")
        monkeypatch.setenv("RELCALC_LOG_STDOUT", "true")
        settings = get_settings()
        assert settings.api_port == 8080
        assert settings.log_stdout is True

    def test_cors_origin_list(self, monkeypatch):
        monkeypatch.setenv("RELCALC_CORS_ORIGINS", " http://a.test , ,http://b.test")
        assert get_settings().cors_origin_list() == ["http://a.test", "http://b.test"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.fixture
def clean_root_logger(monkeypatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(relcalc_logging, "_CONFIGURED", False)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    api_logger = logging.getLogger("relcalc.api")
    for handler in api_logger.handlers:
        handler.close()
    api_logger.handlers = []


class TestSetupLogging:

    def test_writes_to_given_file(self, tmp_path, clean_root_logger):
        log_path = tmp_path / "logs" / "out.log"
        assert relcalc_logging.setup_logging(log_path) == log_path
        logging.getLogger("relcalc.test").warning("hello log")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello log" in log_path.read_text(encoding="utf-8")
        assert (tmp_path / "logs" / "api.log").exists()

    def test_default_path_uses_data_dir(self, tmp_path, monkeypatch, clean_root_logger):
        monkeypatch.setenv("RELCALC_DATA_DIR", str(tmp_path))
        resolved = relcalc_logging.setup_logging()
        assert resolved == tmp_path / "logs" / "relcalc.log"

    def test_rotating_handler(self, tmp_path, monkeypatch, clean_root_logger):
        monkeypatch.setenv("RELCALC_LOG_ROTATE_BYTES", "1024")
        relcalc_logging.setup_logging(tmp_path / "r.log")
        handler_types = {type(h).__name__ for h in logging.getLogger().handlers}
        assert "RotatingFileHandler" in handler_types

    def test_second_call_is_noop(self, tmp_path, clean_root_logger):
        relcalc_logging.setup_logging(tmp_path / "a.log")
        count = len(logging.getLogger().handlers)
        relcalc_logging.setup_logging(tmp_path / "b.log")
        assert len(logging.getLogger().handlers) == count
