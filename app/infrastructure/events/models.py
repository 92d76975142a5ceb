"""Event models for infrastructure event system.

Provides the generic Event record and the Subscription handle returned to
subscribers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict
from uuid import UUID, uuid4


@dataclass
class Event:
    """Base class for all events in the system.

    Events are records of something that happened, used for cross-module
    communication such as locale change notifications.
    """

    event_type: str
    """The type of event (e.g., 'i18n.locale.changed')."""

    timestamp: datetime = field(default_factory=datetime.now)
    """When the event occurred."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events across the system."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Custom metadata for this event type."""


@dataclass(frozen=True, eq=False)
class Subscription:
    """Handle identifying one registered callback.

    Returned by ``EventNotifier.subscribe`` and passed back to
    ``EventNotifier.unsubscribe``. Compared by identity so the same callback
    subscribed twice yields two independent handles.

    Attributes:
        event_type: Event type the callback listens to.
        callback: Callable invoked with the published Event.
        id: Unique handle identifier (for logging).
    """

    event_type: str
    callback: Callable[[Event], Any]
    id: UUID = field(default_factory=uuid4)
