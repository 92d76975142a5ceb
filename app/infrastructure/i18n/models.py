"""Localization models for the i18n system.

Defines locales, render requests, and per-locale translation catalogs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# Entry looked up when a localized placeholder carries no tag
DEFAULT_DICTIONARY_TAG = "value"

# A localization table row: tag -> localized text
LocaleDictionary = Dict[str, str]


class UnsupportedLocaleError(ValueError):
    """Raised when a locale string does not name a supported locale."""


class TemplateNotFoundError(KeyError):
    """Raised by a template source when no template exists for a key."""

    def __init__(self, key: str, locale: Optional[str] = None):
        self.key = key
        self.locale = locale
        super().__init__(key)

    def __str__(self) -> str:
        if self.locale:
            return f"No template for key {self.key!r} in {self.locale}"
        return f"No template for key {self.key!r}"


class Locale(str, Enum):
    """Supported locale identifiers.

    Uses IETF BCP 47 language tag format (e.g., en-US, fr-FR).
    """

    EN_US = "en-US"
    EN_GB = "en-GB"
    FR_FR = "fr-FR"
    DE_DE = "de-DE"
    ES_ES = "es-ES"
    PL_PL = "pl-PL"
    RU_RU = "ru-RU"
    JA_JP = "ja-JP"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale string (e.g., "en-US", "fr-FR").

        Returns:
            Matching Locale enum value.

        Raises:
            UnsupportedLocaleError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise UnsupportedLocaleError(f"Unsupported locale: {locale_str}") from e

    @property
    def language(self) -> str:
        """Language part of locale (e.g., "en" from "en-US")."""
        return self.value.split("-")[0]

    @property
    def region(self) -> str:
        """Region part of locale (e.g., "US" from "en-US")."""
        parts = self.value.split("-")
        return parts[1] if len(parts) > 1 else ""


@dataclass(frozen=True)
class RenderRequest:
    """The arguments of the last ``set_string`` call on a renderer.

    Attributes:
        key: Template key looked up in the active locale.
        args: Values for ``{id}`` placeholders, or None when not supplied.
        loc_arg_ids: Lookup keys for ``@{id}`` placeholders, or None.
    """

    key: str
    args: Optional[Mapping[str, Any]] = None
    loc_arg_ids: Optional[Mapping[str, str]] = None


@dataclass
class TranslationCatalog:
    """Container for the templates and localization tables of one locale.

    Attributes:
        locale: The Locale this catalog is for.
        strings: Template key -> raw template string.
        tables: Lookup key -> {tag: localized text}.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
    """

    locale: Locale
    strings: Dict[str, str] = field(default_factory=dict)
    tables: Dict[str, LocaleDictionary] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_template(self, key: str) -> Optional[str]:
        """Raw template for ``key``, or None if absent."""
        return self.strings.get(key)

    def has_template(self, key: str) -> bool:
        return key in self.strings

    def get_dictionary(self, lookup_key: str) -> Optional[LocaleDictionary]:
        """Localization table row for ``lookup_key``, or None if absent."""
        return self.tables.get(lookup_key)

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones; table rows merge tag by tag.

        Args:
            other: TranslationCatalog to merge.
        """
        self.strings.update(other.strings)
        for lookup_key, row in other.tables.items():
            self.tables.setdefault(lookup_key, {}).update(row)
