"""Locale state manager.

Owns the active locale, the loaded catalogs, and the notifier that tells
renderers when the locale changes. Serves as both the TemplateSource and the
DictionarySource for StringRenderer.
"""

from typing import Callable, Dict, List, Optional, Union

from infrastructure.events import Event, EventNotifier, Subscription
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    Locale,
    LocaleDictionary,
    TemplateNotFoundError,
    TranslationCatalog,
)
from infrastructure.i18n.subscriber import LOCALE_CHANGED
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleManager:
    """Active locale plus per-locale catalogs with fallback lookup.

    Attributes:
        loader: TranslationLoader for loading catalogs.
        catalogs: Loaded TranslationCatalogs by locale.
        fallback_locale: Locale consulted when the active locale misses.
        notifier: Channel on which locale changes are published.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        default_locale: Locale = Locale.EN_US,
        fallback_locale: Locale = Locale.EN_US,
        notifier: Optional[EventNotifier] = None,
    ):
        """Initialize LocaleManager.

        Args:
            loader: TranslationLoader instance for loading catalogs.
            default_locale: Locale active until set_locale() is called.
            fallback_locale: Locale to use when a key is missing.
            notifier: Channel for locale changes; a private one if omitted.
        """
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.notifier = notifier or EventNotifier()
        self.catalogs: Dict[Locale, TranslationCatalog] = {}
        self._locale = default_locale
        logger.info(
            "initialized_locale_manager",
            locale=default_locale.value,
            fallback_locale=fallback_locale.value,
        )

    @property
    def locale(self) -> Locale:
        """The active locale."""
        return self._locale

    def set_locale(self, locale: Union[Locale, str]) -> bool:
        """Switch the active locale and notify subscribers.

        Nothing is published when ``locale`` is already active. A locale whose
        catalog has not been loaded is loaded first.

        Args:
            locale: Locale or locale string (e.g., "fr-FR").

        Returns:
            True if the active locale changed.

        Raises:
            UnsupportedLocaleError: If ``locale`` is not a supported locale string.
            FileNotFoundError: If no catalog exists for ``locale``.
        """
        if not isinstance(locale, Locale):
            locale = Locale.from_string(locale)

        if locale == self._locale:
            return False

        if locale not in self.catalogs:
            self.load_locale(locale)

        previous = self._locale
        self._locale = locale
        logger.info(
            "locale_changed", locale=locale.value, previous_locale=previous.value
        )
        self.notifier.publish(
            Event(
                event_type=LOCALE_CHANGED,
                metadata={"locale": locale.value, "previous_locale": previous.value},
            )
        )
        return True

    def subscribe(self, callback: Callable[[Event], None]) -> Subscription:
        """Register a callback for locale changes."""
        return self.notifier.subscribe(LOCALE_CHANGED, callback)

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove a locale change callback registered with subscribe()."""
        return self.notifier.unsubscribe(subscription)

    def load_all(self) -> None:
        """Load all available locales from loader."""
        self.catalogs = self.loader.load_all()
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def load_locale(self, locale: Locale) -> None:
        """Load specific locale from loader.

        Raises:
            FileNotFoundError: If translation files not found.
        """
        self.catalogs[locale] = self.loader.load(locale)
        logger.info("loaded_locale_translations", locale=locale.value)

    def reload(self) -> None:
        """Re-read all catalogs from the loader, bypassing its cache."""
        self.loader.clear_cache()
        self.catalogs.clear()
        self.load_all()
        logger.info("reloaded_all_translations")

    def get_available_locales(self) -> List[Locale]:
        return list(self.catalogs.keys())

    def get_catalog(self, locale: Locale) -> Optional[TranslationCatalog]:
        return self.catalogs.get(locale)

    def get_template(self, key: str) -> str:
        """Template for ``key`` in the active locale, else the fallback locale.

        Raises:
            TemplateNotFoundError: If neither locale has the key.
        """
        template = self._lookup(lambda catalog: catalog.get_template(key), key)
        if template is None:
            raise TemplateNotFoundError(key, locale=self._locale.value)
        return template

    def get_dictionary(self, lookup_key: str) -> Optional[LocaleDictionary]:
        """Localization table row for ``lookup_key``, or None if not found."""
        return self._lookup(
            lambda catalog: catalog.get_dictionary(lookup_key), lookup_key
        )

    def has_template(self, key: str, locale: Optional[Locale] = None) -> bool:
        catalog = self.catalogs.get(locale or self._locale)
        return catalog.has_template(key) if catalog else False

    def _lookup(self, getter, key: str):
        catalog = self.catalogs.get(self._locale)
        found = getter(catalog) if catalog else None

        if found is None and self._locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            found = getter(fallback_catalog) if fallback_catalog else None
            if found is not None:
                logger.info(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=self._locale.value,
                    fallback_locale=self.fallback_locale.value,
                )

        return found
