"""i18n system - localized string rendering.

Renders a template fetched for the active locale into display text, filling
three kinds of tokens in a fixed order, and re-renders whenever the locale
changes.

Main components:
- models: Locale, RenderRequest, TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- manager: LocaleManager (active locale, catalogs, change notifications)
- tokens: single-pass token scanners
- placeholders / references / rules: the three resolution stages
- renderer: StringRenderer
- subscriber: LocaleChangeSubscriber
- service: LocalizationService facade
"""

from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    Locale,
    LocaleDictionary,
    RenderRequest,
    TemplateNotFoundError,
    TranslationCatalog,
    UnsupportedLocaleError,
)
from infrastructure.i18n.manager import LocaleManager
from infrastructure.i18n.placeholders import PlaceholderResolver
from infrastructure.i18n.protocols import (
    DictionarySource,
    TemplateSource,
    TextBuffer,
    TextSink,
)
from infrastructure.i18n.references import LocalizedReferenceResolver
from infrastructure.i18n.renderer import StringRenderer
from infrastructure.i18n.rules import (
    IndexRule,
    LocalizationRule,
    PluralRule,
    RuleChain,
    default_rules,
)
from infrastructure.i18n.subscriber import LOCALE_CHANGED, LocaleChangeSubscriber
from infrastructure.i18n.factory import create_locale_manager
from infrastructure.i18n.service import LocalizationService

__all__ = [
    "Locale",
    "LocaleDictionary",
    "RenderRequest",
    "TemplateNotFoundError",
    "TranslationCatalog",
    "UnsupportedLocaleError",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "LocaleManager",
    "TemplateSource",
    "DictionarySource",
    "TextSink",
    "TextBuffer",
    "PlaceholderResolver",
    "LocalizedReferenceResolver",
    "LocalizationRule",
    "RuleChain",
    "IndexRule",
    "PluralRule",
    "default_rules",
    "StringRenderer",
    "LocaleChangeSubscriber",
    "LOCALE_CHANGED",
    "create_locale_manager",
    "LocalizationService",
]
