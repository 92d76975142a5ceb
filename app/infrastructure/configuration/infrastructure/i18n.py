"""Localization infrastructure settings."""

from pathlib import Path

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

# app/infrastructure/configuration/infrastructure/i18n.py -> app/locales
DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[3] / "locales"

MISSING_TEMPLATE_FALLBACKS = ("key", "empty")


class LocalizationSettings(InfrastructureSettings):
    """Localization and string rendering configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding ``*.<locale>.yml`` catalogs
        I18N_DEFAULT_LOCALE: Locale active at startup (default: en-US)
        I18N_FALLBACK_LOCALE: Locale consulted when the active one misses
        I18N_USE_CACHE: Cache parsed catalogs in the loader (default: True)
        I18N_MISSING_TEMPLATE_FALLBACK: What to render when a template key is
            unknown: 'key' renders the raw key, 'empty' renders nothing

    Example:
        ```python
        from infrastructure.configuration import settings

        locale = settings.i18n.default_locale
        translations_dir = settings.i18n.translations_dir
        ```
    """

    translations_dir: Path = Field(
        default=DEFAULT_TRANSLATIONS_DIR,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing YAML translation catalogs",
    )
    default_locale: str = Field(
        default="en-US",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale active when the manager starts",
    )
    fallback_locale: str = Field(
        default="en-US",
        alias="I18N_FALLBACK_LOCALE",
        description="Locale consulted when the active locale has no entry",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache parsed catalogs in the loader",
    )
    missing_template_fallback: str = Field(
        default="key",
        alias="I18N_MISSING_TEMPLATE_FALLBACK",
        description="Rendered text for unknown template keys: 'key' or 'empty'",
    )

    @field_validator("missing_template_fallback")
    @classmethod
    def validate_missing_template_fallback(cls, value: str) -> str:
        """Ensure the fallback policy is one of the supported values."""
        if value not in MISSING_TEMPLATE_FALLBACKS:
            raise ValueError(
                f"missing_template_fallback must be one of {MISSING_TEMPLATE_FALLBACKS}, got {value!r}"
            )
        return value
