"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- LocalizationSettings validation and defaults
- Settings class initialization
- Integration with Pydantic BaseSettings
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.configuration import LocalizationSettings, Settings

pytestmark = pytest.mark.unit


class TestLocalizationSettings:
    """Test suite for LocalizationSettings configuration."""

    def test_localization_settings_defaults(self, monkeypatch):
        """Test LocalizationSettings uses correct default values."""
        for name in (
            "I18N_TRANSLATIONS_DIR",
            "I18N_DEFAULT_LOCALE",
            "I18N_FALLBACK_LOCALE",
            "I18N_USE_CACHE",
            "I18N_MISSING_TEMPLATE_FALLBACK",
        ):
            monkeypatch.delenv(name, raising=False)

        i18n = LocalizationSettings()

        assert i18n.default_locale == "en-US"
        assert i18n.fallback_locale == "en-US"
        assert i18n.use_cache is True
        assert i18n.missing_template_fallback == "key"
        assert i18n.translations_dir.name == "locales"
        assert (i18n.translations_dir / "ui.en-US.yml").exists()

    def test_localization_settings_custom_values(self, monkeypatch, tmp_path):
        """Test LocalizationSettings reads I18N_* environment variables."""
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", str(tmp_path))
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "fr-FR")
        monkeypatch.setenv("I18N_FALLBACK_LOCALE", "en-GB")
        monkeypatch.setenv("I18N_USE_CACHE", "false")
        monkeypatch.setenv("I18N_MISSING_TEMPLATE_FALLBACK", "empty")

        i18n = LocalizationSettings()

        assert i18n.translations_dir == Path(tmp_path)
        assert i18n.default_locale == "fr-FR"
        assert i18n.fallback_locale == "en-GB"
        assert i18n.use_cache is False
        assert i18n.missing_template_fallback == "empty"

    def test_localization_settings_field_names(self):
        """Fields can be populated by name as well as by alias."""
        i18n = LocalizationSettings(default_locale="pl-PL")
        assert i18n.default_locale == "pl-PL"

    def test_invalid_missing_template_fallback(self, monkeypatch):
        """Only 'key' and 'empty' are accepted fallback policies."""
        monkeypatch.setenv("I18N_MISSING_TEMPLATE_FALLBACK", "placeholder")

        with pytest.raises(ValidationError):
            LocalizationSettings()


class TestSettings:
    """Test suite for the aggregated Settings object."""

    def test_settings_builds_subsettings(self):
        settings = Settings()
        assert isinstance(settings.i18n, LocalizationSettings)

    def test_settings_accepts_section_override(self):
        i18n = LocalizationSettings(default_locale="de-DE")
        settings = Settings(i18n=i18n)
        assert settings.i18n.default_locale == "de-DE"

    @pytest.mark.parametrize(
        "prefix,expected",
        [("", True), ("dev-", False)],
    )
    def test_is_production(self, monkeypatch, prefix, expected):
        monkeypatch.setenv("PREFIX", prefix)
        assert Settings().is_production is expected
