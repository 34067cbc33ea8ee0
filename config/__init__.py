import os

from src.masjid_rota.masjid_rota.core.exceptions import ConfigurationError


def get_settings_module() -> str:
    # APP_ENV picks the settings module; development is the default.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def require_env(name: str, *fallbacks: str) -> str:
    """First non-empty value among ``name`` and ``fallbacks``.

    Missing configuration is fatal: the settings module fails to import.
    """
    for key in (name, *fallbacks):
        value = os.getenv(key)
        if value:
            return value
    raise ConfigurationError(f"{name} is not set")
