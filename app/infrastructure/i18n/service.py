"""Localization service for dependency injection.

Provides a class-based entry point that wires renderers to a LocaleManager.
"""

from typing import Any, Iterable, List, Mapping, Optional, Union

from infrastructure.configuration import settings
from infrastructure.i18n.factory import create_locale_manager
from infrastructure.i18n.manager import LocaleManager
from infrastructure.i18n.models import Locale
from infrastructure.i18n.protocols import TextBuffer, TextSink
from infrastructure.i18n.renderer import StringRenderer
from infrastructure.i18n.rules import LocalizationRule, default_rules


class LocalizationService:
    """Class-based localization service.

    Thin facade over a LocaleManager: renderers it creates read templates
    and tables from the manager and follow its locale changes.

    Usage:
        service = LocalizationService()

        renderer = service.create_renderer(label)
        renderer.set_string("inventory.count", args={"count": 3})

        service.set_locale(Locale.FR_FR)   # label re-renders in French

        text = service.render("menu.greeting", args={"name": "Alice"})
    """

    def __init__(
        self,
        manager: Optional[LocaleManager] = None,
        missing_template_fallback: Optional[str] = None,
    ):
        """Initialize localization service.

        Args:
            manager: Optional pre-configured LocaleManager. If not provided,
                creates default via factory.
            missing_template_fallback: Override for
                settings.i18n.missing_template_fallback.
        """
        self._manager = manager or create_locale_manager()
        self.missing_template_fallback = (
            missing_template_fallback or settings.i18n.missing_template_fallback
        )

    @property
    def manager(self) -> LocaleManager:
        return self._manager

    @property
    def locale(self) -> Locale:
        return self._manager.locale

    def set_locale(self, locale: Union[Locale, str]) -> bool:
        """Switch the active locale; live renderers refresh themselves.

        Returns:
            True if the active locale changed.
        """
        return self._manager.set_locale(locale)

    def default_rules(self) -> List[LocalizationRule]:
        return default_rules(lambda: self._manager.locale)

    def create_renderer(
        self,
        sink: TextSink,
        rules: Optional[Iterable[LocalizationRule]] = None,
        follow_locale: bool = True,
    ) -> StringRenderer:
        """Create a renderer bound to this service's manager.

        Args:
            sink: Receives rendered text.
            rules: Rule chain; the built-in rules when omitted.
            follow_locale: Refresh automatically on locale change. Call
                close() on the renderer when the sink goes away.

        Returns:
            StringRenderer instance.
        """
        return StringRenderer(
            templates=self._manager,
            dictionaries=self._manager,
            sink=sink,
            rules=self.default_rules() if rules is None else rules,
            notifier=self._manager.notifier if follow_locale else None,
            missing_template_fallback=self.missing_template_fallback,
        )

    def render(
        self,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
        loc_arg_ids: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Render once in the active locale and return the text."""
        buffer = TextBuffer()
        renderer = self.create_renderer(buffer, follow_locale=False)
        renderer.set_string(key, args=args, loc_arg_ids=loc_arg_ids)
        return buffer.text
