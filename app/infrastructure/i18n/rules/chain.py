"""Stage three: resolve leftover ``{...}`` tokens through ordered rules."""

from typing import Dict, Iterable, List, Optional

from infrastructure.i18n.rules.base import LocalizationRule
from infrastructure.i18n.tokens import Token, scan_rule_tokens, substitute
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class RuleChain:
    """Ordered list of rules; the first rule that changes the content wins.

    Registration order is precedence order. Tokens no rule changes stay in
    the output verbatim, braces included, without being reported.
    """

    def __init__(self, rules: Optional[Iterable[LocalizationRule]] = None):
        self.rules: List[LocalizationRule] = list(rules or [])

    def register(self, rule: LocalizationRule) -> None:
        """Append a rule with the lowest precedence."""
        self.rules.append(rule)

    def apply(self, content: str) -> Optional[str]:
        """Run ``content`` through the rules in order.

        A rule that raises or returns a non-string is logged and treated as
        not applicable.

        Returns:
            Output of the first rule whose output differs from ``content``, or
            None if no rule applies.
        """
        for rule in self.rules:
            try:
                output = rule.apply(content)
            except Exception as e:
                logger.error(
                    "rule_failed",
                    rule=type(rule).__name__,
                    content=content,
                    error=str(e),
                )
                continue
            if not isinstance(output, str):
                logger.error(
                    "rule_failed",
                    rule=type(rule).__name__,
                    content=content,
                    error=f"expected str, got {type(output).__name__}",
                )
                continue
            if output != content:
                return output
        return None

    def resolve(self, text: str) -> str:
        """Replace every bare token some rule applies to.

        Args:
            text: Output of the placeholder and localized reference stages.

        Returns:
            Final text.
        """
        tokens = scan_rule_tokens(text)
        if not tokens or not self.rules:
            return text

        outputs: Dict[str, Optional[str]] = {}
        replacements: Dict[Token, str] = {}
        for token in tokens:
            if token.content not in outputs:
                outputs[token.content] = self.apply(token.content)
            output = outputs[token.content]
            if output is not None:
                replacements[token] = output

        return substitute(text, tokens, replacements)

    def __len__(self) -> int:
        return len(self.rules)
