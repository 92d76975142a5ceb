"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- TranslationCatalog
- RenderRequest
- LocaleManager backed by in-memory catalogs
"""

from typing import Dict, Optional

from infrastructure.events import EventNotifier
from infrastructure.i18n import (
    Locale,
    LocaleManager,
    RenderRequest,
    TranslationCatalog,
    TranslationLoader,
)

DEFAULT_STRINGS = {
    Locale.EN_US: {
        "menu.greeting": "Hello {name}!",
        "inventory.count": "You have {count} items",
        "inventory.found": "You found @{item.indefinite}!",
        "item.name": "@{item}",
    },
    Locale.FR_FR: {
        "menu.greeting": "Bonjour {name} !",
        "inventory.count": "Vous avez {count} objets",
        "inventory.found": "Vous avez trouvé @{item.indefinite} !",
        "item.name": "@{item}",
    },
}

DEFAULT_TABLES = {
    Locale.EN_US: {
        "SWORD": {"value": "sword", "indefinite": "a sword"},
        "SHIELD": {"value": "shield", "indefinite": "a shield"},
    },
    Locale.FR_FR: {
        "SWORD": {"value": "épée", "indefinite": "une épée"},
        "SHIELD": {"value": "bouclier", "indefinite": "un bouclier"},
    },
}


def make_translation_catalog(
    locale: Locale = Locale.EN_US,
    strings: Optional[Dict[str, str]] = None,
    tables: Optional[Dict[str, Dict[str, str]]] = None,
    loaded_at: Optional[str] = None,
) -> TranslationCatalog:
    """Create a TranslationCatalog instance.

    Args:
        locale: Locale for the catalog.
        strings: Template key -> template.
        tables: Lookup key -> {tag: text}.
        loaded_at: ISO 8601 timestamp.

    Returns:
        TranslationCatalog instance.
    """
    if strings is None:
        strings = dict(DEFAULT_STRINGS.get(locale, {}))
    if tables is None:
        tables = {
            lookup_key: dict(row)
            for lookup_key, row in DEFAULT_TABLES.get(locale, {}).items()
        }

    return TranslationCatalog(
        locale=locale,
        strings=strings,
        tables=tables,
        loaded_at=loaded_at or "2024-01-01T00:00:00Z",
    )


def make_render_request(
    key: str = "menu.greeting",
    args: Optional[dict] = None,
    loc_arg_ids: Optional[dict] = None,
) -> RenderRequest:
    """Create a RenderRequest instance."""
    return RenderRequest(key=key, args=args, loc_arg_ids=loc_arg_ids)


class InMemoryTranslationLoader(TranslationLoader):
    """TranslationLoader serving pre-built catalogs."""

    def __init__(self, catalogs: Dict[Locale, TranslationCatalog]):
        self.catalogs = catalogs
        self.load_calls = []

    def load(self, locale: Locale) -> TranslationCatalog:
        self.load_calls.append(locale)
        if locale not in self.catalogs:
            raise FileNotFoundError(f"No catalog for {locale.value}")
        return self.catalogs[locale]

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        return dict(self.catalogs)


def make_locale_manager(
    catalogs: Optional[Dict[Locale, TranslationCatalog]] = None,
    default_locale: Locale = Locale.EN_US,
    fallback_locale: Locale = Locale.EN_US,
    notifier: Optional[EventNotifier] = None,
    preload: bool = True,
) -> LocaleManager:
    """Create a LocaleManager over in-memory catalogs.

    Args:
        catalogs: Catalogs by locale; en-US and fr-FR defaults when omitted.
        default_locale: Locale active at start.
        fallback_locale: Locale used on misses.
        notifier: Optional shared notifier.
        preload: Whether to load every catalog immediately.

    Returns:
        LocaleManager instance.
    """
    if catalogs is None:
        catalogs = {
            Locale.EN_US: make_translation_catalog(Locale.EN_US),
            Locale.FR_FR: make_translation_catalog(Locale.FR_FR),
        }
    manager = LocaleManager(
        loader=InMemoryTranslationLoader(catalogs),
        default_locale=default_locale,
        fallback_locale=fallback_locale,
        notifier=notifier,
    )
    if preload:
        manager.load_all()
    return manager
