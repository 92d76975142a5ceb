"""Stage two: fill ``@{id}`` and ``@{id.tag}`` localized placeholders.

The identifier maps, through the caller's ``loc_arg_ids``, to a lookup key in
the localization tables. The optional tag picks an entry in that table row;
without a tag the ``value`` entry is used.
"""

from typing import Dict, Mapping, Optional, Tuple

from infrastructure.i18n.models import DEFAULT_DICTIONARY_TAG, LocaleDictionary
from infrastructure.i18n.protocols import DictionarySource
from infrastructure.i18n.tokens import Token, scan_references, substitute
from infrastructure.logging import get_module_logger

logger = get_module_logger()

TAG_SEPARATOR = "."


def split_reference(content: str) -> Tuple[str, str]:
    """Split token content into (identifier, tag) on the first dot.

    Everything after the first dot is the tag, so ``id.tag.sub`` yields the
    tag ``tag.sub``. The tag is empty when there is no dot.
    """
    identifier, _, tag = content.partition(TAG_SEPARATOR)
    return identifier, tag


class LocalizedReferenceResolver:
    """Resolves localized references against a DictionarySource."""

    def __init__(self, dictionaries: DictionarySource):
        self.dictionaries = dictionaries

    def resolve(
        self, text: str, key: str, loc_arg_ids: Optional[Mapping[str, str]]
    ) -> str:
        """Fill localized references in ``text``.

        Args:
            text: Output of the placeholder stage.
            key: Template key, used in error reports.
            loc_arg_ids: Lookup key by identifier, or None if none supplied.

        Returns:
            ``text`` with resolvable references replaced; unresolvable tokens
            keep their literal ``@{...}`` text.
        """
        tokens = scan_references(text)
        if not tokens:
            return text

        if loc_arg_ids is None:
            logger.error(
                "missing_localized_arguments",
                key=key,
                references=sorted({token.content for token in tokens}),
            )
            return text

        # Row cache for this pass only: identifier -> row (None when not found)
        rows: Dict[str, Optional[LocaleDictionary]] = {}
        resolved: Dict[str, Optional[str]] = {}
        replacements: Dict[Token, str] = {}

        for token in tokens:
            if token.content not in resolved:
                resolved[token.content] = self._resolve_one(
                    token.content, key, loc_arg_ids, rows
                )
            value = resolved[token.content]
            if value is not None:
                replacements[token] = value

        return substitute(text, tokens, replacements)

    def _resolve_one(
        self,
        content: str,
        key: str,
        loc_arg_ids: Mapping[str, str],
        rows: Dict[str, Optional[LocaleDictionary]],
    ) -> Optional[str]:
        identifier, tag = split_reference(content)

        lookup_key = loc_arg_ids.get(identifier)
        if lookup_key is None:
            logger.error(
                "missing_localized_argument_id", key=key, identifier=identifier
            )
            return None

        if identifier not in rows:
            rows[identifier] = self._fetch_row(key, lookup_key)
        row = rows[identifier]

        # The id mapping already names the intended row; a missing row needs no report
        if row is None:
            return None

        if not tag:
            if DEFAULT_DICTIONARY_TAG not in row:
                logger.error(
                    "missing_dictionary_value", key=key, lookup_key=lookup_key
                )
                return None
            return row[DEFAULT_DICTIONARY_TAG]

        if tag not in row:
            logger.error(
                "missing_dictionary_tag", key=key, lookup_key=lookup_key, tag=tag
            )
            return None
        return row[tag]

    def _fetch_row(self, key: str, lookup_key: str) -> Optional[LocaleDictionary]:
        try:
            return self.dictionaries.get_dictionary(lookup_key)
        except Exception as e:
            logger.error(
                "dictionary_fetch_failed",
                key=key,
                lookup_key=lookup_key,
                error=str(e),
            )
            return None
