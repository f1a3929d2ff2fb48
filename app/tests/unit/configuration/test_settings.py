"""Tests for scopetext.configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from scopetext.configuration import I18nSettings, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables from the environment."""
    for name in (
        "PREFIX",
        "LOG_LEVEL",
        "I18N_AMBIENT_LANGUAGE",
        "I18N_DICTIONARIES_DIR",
        "I18N_STRICT_RENDERING",
        "I18N_CACHE_DICTIONARIES",
    ):
        monkeypatch.delenv(name, raising=False)
    # Ignore any .env file in the working directory
    monkeypatch.chdir(Path(__file__).parent)
    return monkeypatch


class TestI18nSettings:
    """Tests for I18nSettings."""

    def test_defaults(self, clean_env):
        """Defaults apply when nothing is configured."""
        settings = I18nSettings()
        assert settings.ambient_language == "en"
        assert settings.dictionaries_dir is None
        assert settings.strict_rendering is True
        assert settings.cache_dictionaries is True

    def test_reads_environment(self, clean_env, tmp_path):
        """Values are read from I18N_* environment variables."""
        clean_env.setenv("I18N_AMBIENT_LANGUAGE", "ja")
        clean_env.setenv("I18N_DICTIONARIES_DIR", str(tmp_path))
        clean_env.setenv("I18N_STRICT_RENDERING", "false")
        settings = I18nSettings()
        assert settings.ambient_language == "ja"
        assert settings.dictionaries_dir == tmp_path
        assert settings.strict_rendering is False

    def test_blank_ambient_language_rejected(self, clean_env):
        """A blank ambient language is a configuration error."""
        clean_env.setenv("I18N_AMBIENT_LANGUAGE", "  ")
        with pytest.raises(ValidationError):
            I18nSettings()


class TestSettings:
    """Tests for the Settings aggregator."""

    def test_instantiates_subsettings(self, clean_env):
        """i18n settings are created automatically."""
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_override_subsettings(self, clean_env):
        """Sub-settings can be passed explicitly."""
        i18n = I18nSettings(I18N_AMBIENT_LANGUAGE="es")
        assert Settings(i18n=i18n).i18n.ambient_language == "es"

    def test_is_production(self, clean_env):
        """An empty PREFIX means production."""
        assert Settings().is_production is True
        clean_env.setenv("PREFIX", "dev-")
        assert Settings().is_production is False


class TestGetSettings:
    """Tests for get_settings()."""

    def test_singleton(self):
        """get_settings() returns the same instance each call."""
        assert get_settings() is get_settings()

    def test_cache_clear(self, clean_env, fresh_settings):
        """cache_clear() forces a fresh instance."""
        first = fresh_settings()
        fresh_settings.cache_clear()
        assert fresh_settings() is not first
