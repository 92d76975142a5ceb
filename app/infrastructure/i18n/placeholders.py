"""Stage one: fill ``{id}`` placeholders from caller-supplied arguments."""

from typing import Any, Dict, Mapping, Optional

from infrastructure.i18n.tokens import Token, scan_placeholders, substitute
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class PlaceholderResolver:
    """Replaces every ``{id}`` token with ``str(args[id])``.

    Values are formatted with their default string conversion; no locale
    aware number formatting is applied.
    """

    def resolve(
        self, text: str, key: str, args: Optional[Mapping[str, Any]]
    ) -> str:
        """Fill placeholders in ``text``.

        Args:
            text: Template being rendered.
            key: Template key, used in error reports.
            args: Argument values by identifier, or None if none were supplied.

        Returns:
            ``text`` with resolvable placeholders replaced. Unresolvable tokens
            keep their literal ``{id}`` text. When ``args`` is None and the
            template has placeholders, ``text`` is returned unchanged.
        """
        tokens = scan_placeholders(text)
        if not tokens:
            return text

        if args is None:
            logger.error(
                "missing_arguments",
                key=key,
                placeholders=sorted({token.content for token in tokens}),
            )
            return text

        values: Dict[str, Optional[str]] = {}
        replacements: Dict[Token, str] = {}
        for token in tokens:
            identifier = token.content
            if identifier not in values:
                if identifier not in args:
                    logger.error("missing_argument", key=key, argument=identifier)
                    # Reported once; later occurrences are skipped silently
                    values[identifier] = None
                    continue
                values[identifier] = self._format(args[identifier], key, identifier)
            if values[identifier] is not None:
                replacements[token] = values[identifier]

        return substitute(text, tokens, replacements)

    @staticmethod
    def _format(value: Any, key: str, identifier: str) -> Optional[str]:
        try:
            return str(value)
        except Exception as e:
            logger.error(
                "argument_format_failed",
                key=key,
                argument=identifier,
                error=str(e),
            )
            return None
