"""Single-pass token scanners for the three template stages.

Each scanner walks the string once and returns the spans of the tokens it
owns, so replacements are applied by position and never by re-searching the
rendered text for the original token.

Token kinds, disambiguated by prefix:
    {name}      placeholder, filled from caller arguments
    @{name.tag} localized reference, filled from a localization table
    {rule:...}  any bare token left after the first two stages
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence

OPEN = "{"
CLOSE = "}"
REFERENCE_MARKER = "@"


@dataclass(frozen=True)
class Token:
    """A brace-delimited span in a template.

    Attributes:
        start: Index of the first character of the token (``@`` or ``{``).
        end: Index one past the closing ``}``.
        content: Text between the braces.
    """

    start: int
    end: int
    content: str

    def text(self, source: str) -> str:
        """Original literal text of the token within ``source``."""
        return source[self.start : self.end]


def _scan(text: str) -> Iterator[Token]:
    """Yield every innermost ``{...}`` span, flagging ``@`` prefixes via start.

    A ``{`` met inside an open token restarts the token at that brace, so
    contents never contain ``{``. An unterminated ``{`` yields nothing.
    """
    open_at = -1
    for index, char in enumerate(text):
        if char == OPEN:
            open_at = index
        elif char == CLOSE and open_at >= 0:
            start = open_at
            if start > 0 and text[start - 1] == REFERENCE_MARKER:
                start -= 1
            yield Token(start=start, end=index + 1, content=text[open_at + 1 : index])
            open_at = -1


def _is_reference(text: str, token: Token) -> bool:
    return text[token.start] == REFERENCE_MARKER


def scan_placeholders(text: str) -> List[Token]:
    """Bare ``{id}`` tokens (not preceded by ``@``)."""
    return [token for token in _scan(text) if not _is_reference(text, token)]


def scan_references(text: str) -> List[Token]:
    """Localized ``@{id}`` / ``@{id.tag}`` tokens."""
    return [token for token in _scan(text) if _is_reference(text, token)]


def scan_rule_tokens(text: str) -> List[Token]:
    """Bare ``{...}`` tokens; call after placeholders and references resolved."""
    return scan_placeholders(text)


def substitute(text: str, tokens: Sequence[Token], replacements: Dict[Token, str]) -> str:
    """Rebuild ``text`` replacing each token found in ``replacements``.

    Tokens absent from ``replacements`` keep their literal text. ``tokens``
    must be ordered by position and non-overlapping, as the scanners return
    them.
    """
    if not replacements:
        return text

    parts = []
    cursor = 0
    for token in tokens:
        if token not in replacements:
            continue
        parts.append(text[cursor : token.start])
        parts.append(replacements[token])
        cursor = token.end
    parts.append(text[cursor:])
    return "".join(parts)
