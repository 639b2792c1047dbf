import pytest

from greeter.config import get_settings

ENV_VARS = ("PORT", "HOST", "GREETING", "LOG_LEVEL", "CORS_ORIGINS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
