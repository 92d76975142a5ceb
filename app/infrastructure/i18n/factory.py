"""Factory functions for creating i18n components.

Builds a LocaleManager from LocalizationSettings so callers don't have to
wire loader, locales, and notifier by hand.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import settings
from infrastructure.events import EventNotifier
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.manager import LocaleManager
from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_locale_manager(
    translations_dir: Optional[Path] = None,
    default_locale: Optional[Locale] = None,
    fallback_locale: Optional[Locale] = None,
    use_cache: Optional[bool] = None,
    preload: bool = True,
    notifier: Optional[EventNotifier] = None,
) -> LocaleManager:
    """Create and configure a LocaleManager instance.

    Arguments left as None are taken from ``settings.i18n``.

    Args:
        translations_dir: Path to YAML translation files.
        default_locale: Locale active at startup.
        fallback_locale: Locale to use when entries are missing.
        use_cache: Whether the loader caches parsed YAML.
        preload: Whether to load all locales immediately.
        notifier: Channel for locale change notifications.

    Returns:
        LocaleManager: Configured manager.

    Raises:
        ValueError: If translations_dir does not exist.

    Usage:
        manager = create_locale_manager()

        manager = create_locale_manager(translations_dir=Path("/custom/locales"))

        # Lazy loading
        manager = create_locale_manager(preload=False)
        manager.load_locale(Locale.EN_US)
    """
    config = settings.i18n
    translations_dir = translations_dir or config.translations_dir
    default_locale = default_locale or Locale.from_string(config.default_locale)
    fallback_locale = fallback_locale or Locale.from_string(config.fallback_locale)
    if use_cache is None:
        use_cache = config.use_cache

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        use_cache=use_cache,
    )
    manager = LocaleManager(
        loader=loader,
        default_locale=default_locale,
        fallback_locale=fallback_locale,
        notifier=notifier,
    )

    if preload:
        manager.load_all()
        logger.info(
            "locale_manager_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(manager.get_available_locales()),
        )
    else:
        logger.info(
            "locale_manager_created_lazy",
            translations_dir=str(translations_dir),
        )

    return manager
