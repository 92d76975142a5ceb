"""Ties a callback's lifetime to the locale-change notification."""

from typing import Callable, Optional

from infrastructure.events import Event, EventNotifier, Subscription
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALE_CHANGED = "i18n.locale.changed"


class LocaleChangeSubscriber:
    """Subscribes ``callback`` to locale changes until closed.

    The subscription is made on construction and removed by close(), so the
    notifier never keeps a closed owner alive.

    Usage:
        with LocaleChangeSubscriber(notifier, renderer.refresh_string):
            manager.set_locale(Locale.FR_FR)
    """

    def __init__(self, notifier: EventNotifier, callback: Callable[[], None]):
        self.notifier = notifier
        self.callback = callback
        self._subscription: Optional[Subscription] = notifier.subscribe(
            LOCALE_CHANGED, self._on_locale_changed
        )

    @property
    def active(self) -> bool:
        return self._subscription is not None

    def _on_locale_changed(self, event: Event) -> None:
        logger.debug(
            "locale_changed_received",
            locale=event.metadata.get("locale"),
            correlation_id=str(event.correlation_id),
        )
        self.callback()

    def close(self) -> None:
        """Unsubscribe; further calls are no-ops."""
        if self._subscription is None:
            return
        self.notifier.unsubscribe(self._subscription)
        self._subscription = None

    def __enter__(self) -> "LocaleChangeSubscriber":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
