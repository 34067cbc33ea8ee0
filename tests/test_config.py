import importlib
import sys

import pytest

from config import get_settings_module, require_env
from src.masjid_rota.masjid_rota.core.exceptions import ConfigurationError


def test_require_env_uses_first_non_empty(monkeypatch):
    monkeypatch.setenv("LONDON_PRAYER_TIMES_KEY", "")
    monkeypatch.setenv("PRAYER_TIMES_API_KEY", "abc")

    assert require_env("LONDON_PRAYER_TIMES_KEY", "PRAYER_TIMES_API_KEY") == "abc"


def test_require_env_missing_is_configuration_error(monkeypatch):
    monkeypatch.delenv("DB_HOST", raising=False)

    with pytest.raises(ConfigurationError, match="DB_HOST is not set"):
        require_env("DB_HOST")


def test_production_settings_fail_at_import_without_secrets(monkeypatch):
    for name in ("DB_HOST", "DB_USER", "DB_PASSWORD", "LONDON_PRAYER_TIMES_KEY", "PRAYER_TIMES_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delitem(sys.modules, "config.production", raising=False)

    with pytest.raises(ConfigurationError):
        importlib.import_module("config.production")


@pytest.mark.parametrize(
    "env, module",
    [("prod", "config.production"), ("testing", "config.testing"), ("", "config.development")],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module
