"""Infrastructure event system - in-process publish/subscribe.

Usage:

    from infrastructure.events import Event, EventNotifier

    notifier = EventNotifier()
    handle = notifier.subscribe("i18n.locale.changed", lambda event: ...)
    notifier.publish(Event(event_type="i18n.locale.changed"))
    notifier.unsubscribe(handle)
"""

from infrastructure.events.models import Event, Subscription
from infrastructure.events.notifier import EventNotifier

__all__ = [
    "Event",
    "EventNotifier",
    "Subscription",
]
