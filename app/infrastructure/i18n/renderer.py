"""Render a localized template into display text.

Rendering runs three stages over the template fetched for the active locale:

1. ``{id}`` placeholders from caller arguments
2. ``@{id}`` / ``@{id.tag}`` localized references from localization tables
3. leftover ``{...}`` tokens through the rule chain

Every failure is logged and contained to the token (or stage) that caused it,
so a best-effort text is always displayed.
"""

from typing import Any, Iterable, Mapping, Optional

from infrastructure.events import EventNotifier
from infrastructure.i18n.models import RenderRequest
from infrastructure.i18n.placeholders import PlaceholderResolver
from infrastructure.i18n.protocols import DictionarySource, TemplateSource, TextSink
from infrastructure.i18n.references import LocalizedReferenceResolver
from infrastructure.i18n.rules import LocalizationRule, RuleChain
from infrastructure.i18n.subscriber import LocaleChangeSubscriber
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class StringRenderer:
    """Keeps one sink showing the current locale's rendering of a request.

    Not thread safe; callers serialize access to an instance.

    Args:
        templates: Source of raw templates for the active locale.
        dictionaries: Source of localization table rows.
        sink: Receives each rendered text.
        rules: Rules for stage three, in precedence order.
        notifier: When given, the renderer refreshes itself on every locale
            change until close() is called.
        missing_template_fallback: 'key' renders the raw key when the template
            is unknown, 'empty' renders an empty string.
    """

    def __init__(
        self,
        templates: TemplateSource,
        dictionaries: DictionarySource,
        sink: TextSink,
        rules: Optional[Iterable[LocalizationRule]] = None,
        notifier: Optional[EventNotifier] = None,
        missing_template_fallback: str = "key",
    ):
        self.templates = templates
        self.sink = sink
        self.missing_template_fallback = missing_template_fallback
        self.placeholders = PlaceholderResolver()
        self.references = LocalizedReferenceResolver(dictionaries)
        self.rule_chain = RuleChain(rules)
        self._request: Optional[RenderRequest] = None
        self._text: Optional[str] = None
        self._subscriber: Optional[LocaleChangeSubscriber] = None
        if notifier is not None:
            self._subscriber = LocaleChangeSubscriber(notifier, self.refresh_string)

    @property
    def request(self) -> Optional[RenderRequest]:
        return self._request

    @property
    def text(self) -> Optional[str]:
        """Last text sent to the sink, or None before the first render."""
        return self._text

    def set_string(
        self,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
        loc_arg_ids: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Replace the stored request and render it immediately.

        Args:
            key: Template key.
            args: Values for ``{id}`` placeholders.
            loc_arg_ids: Lookup keys for ``@{id}`` placeholders.
        """
        self._request = RenderRequest(key=key, args=args, loc_arg_ids=loc_arg_ids)
        self.refresh_string()

    def refresh_string(self) -> None:
        """Re-render the stored request against current sources.

        Does nothing until set_string() has been called.
        """
        request = self._request
        if request is None:
            return

        text = self._fetch_template(request.key)
        text = self.placeholders.resolve(text, request.key, request.args)
        text = self.references.resolve(text, request.key, request.loc_arg_ids)
        text = self.rule_chain.resolve(text)

        self._text = text
        self.sink.display(text)

    def _fetch_template(self, key: str) -> str:
        try:
            return self.templates.get_template(key)
        except KeyError as e:
            logger.error(
                "template_not_found",
                key=key,
                locale=getattr(e, "locale", None),
                fallback=self.missing_template_fallback,
            )
        except Exception as e:
            logger.error(
                "template_fetch_failed",
                key=key,
                error=str(e),
                fallback=self.missing_template_fallback,
            )
        return key if self.missing_template_fallback == "key" else ""

    def close(self) -> None:
        """Stop following locale changes."""
        if self._subscriber is not None:
            self._subscriber.close()
            self._subscriber = None

    def __enter__(self) -> "StringRenderer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
