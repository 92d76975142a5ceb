"""Rule capability and the shared ``name:argument|form|form`` microsyntax."""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional

ARGUMENT_SEPARATOR = ":"
FORM_SEPARATOR = "|"


class LocalizationRule(ABC):
    """A pure text transform applied to leftover ``{...}`` tokens.

    A rule that does not recognise the content returns it unchanged; any
    other return value is the token's replacement. Rules must not keep state
    between calls.
    """

    @abstractmethod
    def apply(self, content: str) -> str:
        """Transform token content, or return it unchanged if not applicable.

        Args:
            content: Text between the token's braces.

        Returns:
            Replacement text, or ``content`` itself when the rule does not match.
        """
        pass


class RuleCall(NamedTuple):
    """Parsed ``name:argument|form|form`` token content."""

    argument: str
    forms: List[str]


def parse_rule_call(content: str, name: str) -> Optional[RuleCall]:
    """Parse content addressed to the rule called ``name``.

    ``"plural:3|item|items"`` parsed for ``"plural"`` gives
    ``RuleCall(argument="3", forms=["item", "items"])``.

    Returns:
        The parsed call, or None if the content is not addressed to ``name``
        or carries no forms.
    """
    prefix = f"{name}{ARGUMENT_SEPARATOR}"
    if not content.startswith(prefix):
        return None

    argument, *forms = content[len(prefix) :].split(FORM_SEPARATOR)
    if not forms:
        return None
    return RuleCall(argument=argument.strip(), forms=forms)
