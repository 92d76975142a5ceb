"""Translation loading interface and implementations.

Defines the contract for loading catalogs and provides a YAML-based loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import yaml

from infrastructure.i18n.models import (
    DEFAULT_DICTIONARY_TAG,
    Locale,
    TranslationCatalog,
    UnsupportedLocaleError,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation files
    for different locales.
    """

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the catalog for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            TranslationCatalog with loaded templates and tables.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load catalogs for all available locales.

        Returns:
            Dict mapping Locale to TranslationCatalog.
        """
        pass

    def clear_cache(self) -> None:
        """Forget previously loaded catalogs so the next load re-reads them."""


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named ``<locale>.yml`` or ``<domain>.<locale>.yml`` in the
    translations directory, each with two optional sections:

        strings:
          menu:
            title: "Hello {name}!"       # key "menu.title"
        tables:
          SWORD:
            value: "sword"
            plural: "swords"
          SHIELD: "shield"              # same as {value: "shield"}

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Cache of loaded catalogs (locale -> catalog).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the catalog for a locale from YAML files.

        Merges every file matching ``*.<locale>.yml`` (and ``<locale>.yml``)
        in filename order.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog with loaded templates and tables.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale.value)
            return self.cache[locale]

        catalog = TranslationCatalog(
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        yaml_files = sorted(
            set(self.translations_dir.glob(f"*.{locale.value}.yml"))
            | set(self.translations_dir.glob(f"{locale.value}.yml"))
        )

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(catalog, data, yaml_file)

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
            template_count=len(catalog.strings),
            table_count=len(catalog.tables),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load catalogs for every locale that has at least one file.

        Returns:
            Dict mapping each Locale to its TranslationCatalog.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "menu.en-US.yml" -> "en-US", "en-US.yml" -> "en-US"
            locale_str = yaml_file.stem.split(".")[-1]
            try:
                locales_found.add(Locale.from_string(locale_str))
            except UnsupportedLocaleError:
                logger.debug("skipped_unrecognized_locale_file", file=str(yaml_file))

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for locale in locales_found:
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale.value)

        return result

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Any,
        source_file: Path,
    ) -> None:
        """Merge one parsed YAML document into catalog.

        Args:
            catalog: TranslationCatalog to merge into.
            data: Parsed YAML data.
            source_file: Source file (for logging).
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        strings = data.get("strings") or {}
        if isinstance(strings, dict):
            self._flatten_strings(catalog.strings, strings, prefix="")
        else:
            logger.warning(
                "invalid_section_format",
                file=str(source_file),
                section="strings",
                expected="dict",
            )

        tables = data.get("tables") or {}
        if not isinstance(tables, dict):
            logger.warning(
                "invalid_section_format",
                file=str(source_file),
                section="tables",
                expected="dict",
            )
            return

        for lookup_key, row in tables.items():
            if isinstance(row, dict):
                entries = {
                    str(tag): str(text)
                    for tag, text in row.items()
                    if text is not None
                }
            elif isinstance(row, str):
                entries = {DEFAULT_DICTIONARY_TAG: row}
            else:
                logger.warning(
                    "invalid_table_row",
                    file=str(source_file),
                    lookup_key=str(lookup_key),
                    expected="dict or str",
                )
                continue
            catalog.tables.setdefault(str(lookup_key), {}).update(entries)

    def _flatten_strings(
        self, target: Dict[str, str], node: Dict[Any, Any], prefix: str
    ) -> None:
        for name, value in node.items():
            key = f"{prefix}{name}"
            if isinstance(value, dict):
                self._flatten_strings(target, value, prefix=f"{key}.")
            elif value is not None:
                target[key] = str(value)

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
