"""Rules applied to bare tokens left after placeholder resolution.

New rules subclass LocalizationRule and are appended to a RuleChain; earlier
rules take precedence.
"""

from typing import Callable, List, Union

from infrastructure.i18n.models import Locale
from infrastructure.i18n.rules.base import LocalizationRule, RuleCall, parse_rule_call
from infrastructure.i18n.rules.chain import RuleChain
from infrastructure.i18n.rules.index import IndexRule
from infrastructure.i18n.rules.plural import PluralRule, plural_category


def default_rules(
    locale_provider: Callable[[], Union[Locale, str]],
) -> List[LocalizationRule]:
    """The built-in rules in precedence order."""
    return [
        IndexRule(),
        PluralRule(locale_provider),
    ]


__all__ = [
    "LocalizationRule",
    "RuleCall",
    "RuleChain",
    "IndexRule",
    "PluralRule",
    "default_rules",
    "parse_rule_call",
    "plural_category",
]
