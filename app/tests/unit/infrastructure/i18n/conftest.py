"""Feature-level fixtures for i18n system tests.

Provides YAML catalogs on disk, in-memory locale managers, and sinks.
"""

import pytest
import yaml

from infrastructure.events import EventNotifier
from infrastructure.i18n import TextBuffer, YAMLTranslationLoader
from tests.factories.i18n import make_locale_manager


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - menu.en-US.yml
    - menu.fr-FR.yml
    - items.en-US.yml
    - items.fr-FR.yml
    """
    en_us_menu = {
        "strings": {
            "menu": {
                "greeting": "Hello {name}!",
                "title": "Main menu",
            },
            "inventory": {
                "found": "You found @{item.indefinite}!",
            },
        }
    }
    with open(tmp_path / "menu.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_menu, f, allow_unicode=True)

    en_us_items = {
        "tables": {
            "SWORD": {"value": "sword", "indefinite": "a sword"},
            "POTION": "potion",
        }
    }
    with open(tmp_path / "items.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_items, f, allow_unicode=True)

    fr_fr_menu = {
        "strings": {
            "menu": {
                "greeting": "Bonjour {name} !",
            },
            "inventory": {
                "found": "Vous avez trouvé @{item.indefinite} !",
            },
        }
    }
    with open(tmp_path / "menu.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr_menu, f, allow_unicode=True)

    fr_fr_items = {
        "tables": {
            "SWORD": {"value": "épée", "indefinite": "une épée"},
        }
    }
    with open(tmp_path / "items.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr_items, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def notifier():
    return EventNotifier()


@pytest.fixture
def manager(notifier):
    """LocaleManager over the default in-memory en-US / fr-FR catalogs."""
    return make_locale_manager(notifier=notifier)


@pytest.fixture
def buffer():
    return TextBuffer()
