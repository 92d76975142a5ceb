"""Pick a word form from a count using the active locale's plural rules.

Plural categories follow CLDR cardinal rules for integer counts:

    en, de, es   one, other
    fr           one (0 and 1), other
    pl           one, few, many, other
    ru           one, few, many, other
    ja           other
"""

from typing import Callable, Dict, List, Optional, Union

from infrastructure.i18n.models import Locale
from infrastructure.i18n.rules.base import LocalizationRule, parse_rule_call

PLURAL_RULE_NAME = "plural"
COUNT_MARKER = "#"
FORM_KEY_SEPARATOR = "="

ONE = "one"
FEW = "few"
MANY = "many"
OTHER = "other"
CATEGORIES = ("zero", ONE, "two", FEW, MANY, OTHER)


def _one_other(n: int) -> str:
    return ONE if n == 1 else OTHER


def _french(n: int) -> str:
    return ONE if n in (0, 1) else OTHER


def _polish(n: int) -> str:
    if n == 1:
        return ONE
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return FEW
    return MANY


def _russian(n: int) -> str:
    if n % 10 == 1 and n % 100 != 11:
        return ONE
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return FEW
    return MANY


def _no_plural(n: int) -> str:
    return OTHER


# language -> (category function, category order for positional forms)
PLURAL_RULES: Dict[str, tuple] = {
    "en": (_one_other, (ONE, OTHER)),
    "de": (_one_other, (ONE, OTHER)),
    "es": (_one_other, (ONE, OTHER)),
    "fr": (_french, (ONE, OTHER)),
    "pl": (_polish, (ONE, FEW, MANY, OTHER)),
    "ru": (_russian, (ONE, FEW, MANY, OTHER)),
    "ja": (_no_plural, (OTHER,)),
}
DEFAULT_PLURAL_RULE = (_one_other, (ONE, OTHER))


def _language_of(locale: Union[Locale, str]) -> str:
    value = locale.value if isinstance(locale, Locale) else str(locale)
    return value.replace("_", "-").split("-")[0].lower()


def plural_category(count: int, locale: Union[Locale, str]) -> str:
    """CLDR plural category of an integer count in ``locale``."""
    category_of, _ = PLURAL_RULES.get(_language_of(locale), DEFAULT_PLURAL_RULE)
    return category_of(abs(count))


class PluralRule(LocalizationRule):
    """``{plural:N|form|form...}`` renders the form matching count N.

    Forms are either positional, in the language's category order
    (``{plural:{n}|item|items}`` in English), or keyed by category
    (``{plural:{n}|one=plik|few=pliki|many=plików}``). A ``#`` in the
    chosen form is replaced by the count. A missing category falls back to
    ``other`` and then to the last form. Non-integer counts use ``other``.

    Args:
        locale_provider: Returns the currently active locale.
    """

    def __init__(self, locale_provider: Callable[[], Union[Locale, str]]):
        self.locale_provider = locale_provider

    def apply(self, content: str) -> str:
        call = parse_rule_call(content, PLURAL_RULE_NAME)
        if call is None:
            return content

        category = self._category(call.argument)
        if category is None:
            return content

        form = self._select(call.forms, category)
        return form.replace(COUNT_MARKER, call.argument)

    def _category(self, argument: str) -> Optional[str]:
        try:
            return plural_category(int(argument), self.locale_provider())
        except ValueError:
            pass
        try:
            float(argument)
        except ValueError:
            return None
        return OTHER

    def _select(self, forms: List[str], category: str) -> str:
        keyed = self._keyed_forms(forms)
        if keyed is not None:
            return keyed.get(category, keyed.get(OTHER, list(keyed.values())[-1]))

        _, order = PLURAL_RULES.get(
            _language_of(self.locale_provider()), DEFAULT_PLURAL_RULE
        )
        positional = dict(zip(order, forms))
        return positional.get(category, positional.get(OTHER, forms[-1]))

    @staticmethod
    def _keyed_forms(forms: List[str]) -> Optional[Dict[str, str]]:
        keyed = {}
        for form in forms:
            name, separator, text = form.partition(FORM_KEY_SEPARATOR)
            if not separator or name.strip() not in CATEGORIES:
                return None
            keyed[name.strip()] = text
        return keyed
