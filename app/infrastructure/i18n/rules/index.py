"""Select one of several forms by explicit position."""

from infrastructure.i18n.rules.base import LocalizationRule, parse_rule_call

INDEX_RULE_NAME = "index"


class IndexRule(LocalizationRule):
    """``{index:N|form0|form1|...}`` renders form N (zero based).

    Typically N comes from a placeholder, e.g.
    ``{index:{slot}|first|second|third}``. A non-integer or out of range N
    leaves the token alone.
    """

    def apply(self, content: str) -> str:
        call = parse_rule_call(content, INDEX_RULE_NAME)
        if call is None:
            return content

        try:
            position = int(call.argument)
        except ValueError:
            return content

        if not 0 <= position < len(call.forms):
            return content
        return call.forms[position]
