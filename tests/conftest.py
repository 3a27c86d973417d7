import pytest

from jsonconf.components import defaults


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # no stray CONFIG_PATH / .env from the developer machine
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    monkeypatch.delenv("LOG_FILE_PATH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_default_data():
    saved = dict(defaults.DEFAULT_DATA)
    yield
    defaults.DEFAULT_DATA.clear()
    defaults.DEFAULT_DATA.update(saved)


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "settings" / "config.json")
