"""Unit tests for infrastructure event models."""

import pytest
from datetime import datetime

from infrastructure.events.models import Event, Subscription

pytestmark = pytest.mark.unit


class TestEvent:
    """Tests for Event base class."""

    def test_event_creation_with_all_fields(self, event_factory):
        """Test creating event with all required fields."""
        event = event_factory(event_type="test.action", metadata={"key": "value"})

        assert event.event_type == "test.action"
        assert event.metadata == {"key": "value"}
        assert isinstance(event.timestamp, datetime)
        assert event.correlation_id is not None

    def test_event_creation_with_defaults(self):
        """Test creating event with default values."""
        event = Event(event_type="test.event")

        assert event.event_type == "test.event"
        assert event.metadata == {}
        assert isinstance(event.timestamp, datetime)
        assert event.correlation_id is not None


class TestSubscription:
    """Tests for Subscription handle."""

    def test_handles_compare_by_identity(self):
        def callback(event):
            pass

        first = Subscription(event_type="test.event", callback=callback)
        second = Subscription(event_type="test.event", callback=callback)

        assert first != second
        assert first.id != second.id

    def test_handle_is_immutable(self):
        subscription = Subscription(event_type="test.event", callback=print)
        with pytest.raises(AttributeError):
            subscription.event_type = "other"
