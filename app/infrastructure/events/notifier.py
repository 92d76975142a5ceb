"""Instance-owned publish/subscribe channel.

Each EventNotifier keeps its own subscriber registry, so lifetimes are managed
explicitly through Subscription handles instead of a process-wide table.
Delivery is synchronous, in-process, and unordered from the subscriber's
point of view.
"""

from typing import Any, Callable, Dict, List

from infrastructure.events.models import Event, Subscription
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class EventNotifier:
    """Synchronous event channel with explicit subscription handles.

    Example:
        notifier = EventNotifier()
        handle = notifier.subscribe("i18n.locale.changed", on_change)
        notifier.publish(Event(event_type="i18n.locale.changed"))
        notifier.unsubscribe(handle)
    """

    def __init__(self):
        self._subscriptions: Dict[str, List[Subscription]] = {}

    def subscribe(
        self, event_type: str, callback: Callable[[Event], Any]
    ) -> Subscription:
        """Register a callback for an event type.

        Args:
            event_type: The type of event to listen for.
            callback: Callable invoked with the Event on each publish.

        Returns:
            Subscription handle to pass to unsubscribe().
        """
        subscription = Subscription(event_type=event_type, callback=callback)
        self._subscriptions.setdefault(event_type, []).append(subscription)
        logger.debug(
            "subscribed_event_handler",
            handler=getattr(callback, "__name__", "unknown"),
            event_type=event_type,
            subscription_id=str(subscription.id),
            total_handlers=len(self._subscriptions[event_type]),
        )
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove a previously registered callback.

        Safe to call more than once with the same handle.

        Args:
            subscription: Handle returned by subscribe().

        Returns:
            True if the handle was registered and has been removed.
        """
        handlers = self._subscriptions.get(subscription.event_type, [])
        for index, registered in enumerate(handlers):
            if registered is subscription:
                del handlers[index]
                if not handlers:
                    del self._subscriptions[subscription.event_type]
                logger.debug(
                    "unsubscribed_event_handler",
                    event_type=subscription.event_type,
                    subscription_id=str(subscription.id),
                )
                return True
        return False

    def publish(self, event: Event) -> int:
        """Deliver an event synchronously to every current subscriber.

        If a callback raises, the error is logged and delivery continues with
        the remaining subscribers. A handle removed by an earlier callback in
        the same publish is skipped. A handle added during delivery is first
        called on the next publish.

        Args:
            event: The event to deliver.

        Returns:
            Number of callbacks invoked.
        """
        handlers = list(self._subscriptions.get(event.event_type, []))

        logger.info(
            "publishing_event",
            event_type=event.event_type,
            handler_count=len(handlers),
            correlation_id=str(event.correlation_id),
        )

        invoked = 0
        for subscription in handlers:
            if not self._is_registered(subscription):
                continue
            invoked += 1
            try:
                subscription.callback(event)
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    handler=getattr(subscription.callback, "__name__", "unknown"),
                    event_type=event.event_type,
                    error=str(e),
                    correlation_id=str(event.correlation_id),
                )

        return invoked

    def _is_registered(self, subscription: Subscription) -> bool:
        return any(
            registered is subscription
            for registered in self._subscriptions.get(subscription.event_type, [])
        )

    def subscriber_count(self, event_type: str) -> int:
        """Number of callbacks currently registered for an event type."""
        return len(self._subscriptions.get(event_type, []))

    def clear(self) -> None:
        """Drop every subscription.

        WARNING: This is intended for testing only.
        """
        self._subscriptions.clear()
        logger.debug("cleared_all_subscriptions")
