import logging
from logging.handlers import RotatingFileHandler

import pytest

from jsonconf.config import config
from jsonconf.config.logging_config import setup_logging


def test_resolve_config_path(monkeypatch):
    assert config.resolve_config_path() == "config.json"
    assert config.resolve_config_path("mine.json") == "mine.json"
    monkeypatch.setenv("CONFIG_PATH", "/etc/app/config.json")
    assert config.resolve_config_path() == "/etc/app/config.json"
    assert config.resolve_config_path("mine.json") == "mine.json"


def test_empty_env_falls_back(monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", "")
    assert config.resolve_config_path() == "config.json"


def test_log_settings(monkeypatch):
    assert config.log_level() == "INFO"
    assert config.log_file_path() is None
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE_PATH", "app.log")
    assert config.log_level() == "DEBUG"
    assert config.log_file_path() == "app.log"


@pytest.fixture
def bare_root():
    # not registered with the manager, so pytest never attaches capture handlers
    target = logging.Logger("jsonconf.tests.bare")
    yield target
    for h in list(target.handlers):
        target.removeHandler(h)
        h.close()
    target.setLevel(logging.NOTSET)
    logging.captureWarnings(False)


def test_setup_logging_stream_only(bare_root):
    assert setup_logging(bare_root) is True
    assert len(bare_root.handlers) == 1
    assert bare_root.level == logging.INFO


def test_setup_logging_with_file(bare_root, monkeypatch, tmp_path):
    log_file = tmp_path / "store.log"
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FILE_PATH", str(log_file))

    assert setup_logging(bare_root) is True
    assert bare_root.level == logging.WARNING
    assert any(isinstance(h, RotatingFileHandler) for h in bare_root.handlers)

    bare_root.warning("hello file")
    for h in bare_root.handlers:
        h.flush()
    assert "| WARNING | jsonconf.tests.bare | hello file" in log_file.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(bare_root):
    setup_logging(bare_root)
    assert setup_logging(bare_root) is False
    assert len(bare_root.handlers) == 1
