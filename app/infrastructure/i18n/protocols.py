"""Interfaces between the string renderer and its collaborators.

The renderer only depends on these protocols; LocaleManager implements both
sources, and any UI widget that can show text can act as a sink.
"""

from typing import List, Optional, Protocol

from infrastructure.i18n.models import LocaleDictionary


class TemplateSource(Protocol):
    """Provides raw templates for the active locale."""

    def get_template(self, key: str) -> str:
        """Return the active-locale template for ``key``.

        Raises:
            TemplateNotFoundError: If no template exists for the key.
        """
        ...


class DictionarySource(Protocol):
    """Provides localization table rows for the active locale."""

    def get_dictionary(self, lookup_key: str) -> Optional[LocaleDictionary]:
        """Return the {tag: text} row for ``lookup_key``, or None if not found."""
        ...


class TextSink(Protocol):
    """Receives the final rendered text."""

    def display(self, text: str) -> None: ...


class TextBuffer:
    """In-memory TextSink that records everything it is asked to display."""

    def __init__(self):
        self.text: str = ""
        self.history: List[str] = []

    def display(self, text: str) -> None:
        self.text = text
        self.history.append(text)
