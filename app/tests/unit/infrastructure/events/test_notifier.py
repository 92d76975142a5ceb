"""Unit tests for infrastructure.events.notifier module."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.events import Event, EventNotifier

pytestmark = pytest.mark.unit


class TestSubscribe:
    """Tests for EventNotifier.subscribe and unsubscribe."""

    def test_subscribe_returns_handle(self, event_notifier, mock_event_handler):
        subscription = event_notifier.subscribe("test.event", mock_event_handler)

        assert subscription.event_type == "test.event"
        assert subscription.callback is mock_event_handler
        assert event_notifier.subscriber_count("test.event") == 1

    def test_same_callback_twice_gives_two_handles(
        self, event_notifier, mock_event_handler
    ):
        first = event_notifier.subscribe("test.event", mock_event_handler)
        event_notifier.subscribe("test.event", mock_event_handler)

        assert event_notifier.subscriber_count("test.event") == 2

        assert event_notifier.unsubscribe(first) is True
        assert event_notifier.subscriber_count("test.event") == 1

    def test_unsubscribe_twice(self, event_notifier, mock_event_handler):
        subscription = event_notifier.subscribe("test.event", mock_event_handler)

        assert event_notifier.unsubscribe(subscription) is True
        assert event_notifier.unsubscribe(subscription) is False
        assert event_notifier.subscriber_count("test.event") == 0

    def test_unsubscribe_foreign_handle(self, mock_event_handler):
        owner = EventNotifier()
        other = EventNotifier()
        subscription = owner.subscribe("test.event", mock_event_handler)

        assert other.unsubscribe(subscription) is False
        assert owner.subscriber_count("test.event") == 1

    def test_notifiers_are_independent(self, mock_event_handler):
        first = EventNotifier()
        second = EventNotifier()
        first.subscribe("test.event", mock_event_handler)

        second.publish(Event(event_type="test.event"))

        mock_event_handler.assert_not_called()

    def test_clear(self, event_notifier, mock_event_handler):
        event_notifier.subscribe("a", mock_event_handler)
        event_notifier.subscribe("b", mock_event_handler)

        event_notifier.clear()

        assert event_notifier.subscriber_count("a") == 0
        assert event_notifier.subscriber_count("b") == 0


class TestPublish:
    """Tests for EventNotifier.publish."""

    def test_delivers_event_to_subscribers(self, event_notifier, event_factory):
        first = MagicMock()
        second = MagicMock()
        event_notifier.subscribe("test.event", first)
        event_notifier.subscribe("test.event", second)
        event = event_factory()

        delivered = event_notifier.publish(event)

        assert delivered == 2
        first.assert_called_once_with(event)
        second.assert_called_once_with(event)

    def test_only_matching_event_type(self, event_notifier, mock_event_handler):
        event_notifier.subscribe("test.event", mock_event_handler)

        delivered = event_notifier.publish(Event(event_type="other.event"))

        assert delivered == 0
        mock_event_handler.assert_not_called()

    def test_failing_handler_does_not_stop_delivery(self, event_notifier):
        def failing(event):
            raise RuntimeError("boom")

        healthy = MagicMock()
        event_notifier.subscribe("test.event", failing)
        event_notifier.subscribe("test.event", healthy)

        with patch("infrastructure.events.notifier.logger") as mock_logger:
            delivered = event_notifier.publish(Event(event_type="test.event"))

        assert delivered == 2
        healthy.assert_called_once()
        mock_logger.error.assert_called_once()
        args, kwargs = mock_logger.error.call_args
        assert args[0] == "event_handler_failed"
        assert kwargs["handler"] == "failing"
        assert kwargs["error"] == "boom"

    def test_unsubscribe_during_delivery(self, event_notifier):
        calls = []
        handles = {}

        def first(event):
            calls.append("first")
            event_notifier.unsubscribe(handles["second"])

        def second(event):
            calls.append("second")

        handles["first"] = event_notifier.subscribe("test.event", first)
        handles["second"] = event_notifier.subscribe("test.event", second)

        delivered = event_notifier.publish(Event(event_type="test.event"))
        assert calls == ["first"]
        assert delivered == 1

        event_notifier.publish(Event(event_type="test.event"))
        assert calls == ["first", "first"]

    def test_subscribe_during_delivery(self, event_notifier):
        late = MagicMock()

        def register(event):
            event_notifier.subscribe("test.event", late)

        event_notifier.subscribe("test.event", register)

        event_notifier.publish(Event(event_type="test.event"))
        late.assert_not_called()

        event_notifier.publish(Event(event_type="test.event"))
        late.assert_called_once()

    def test_publish_without_subscribers(self, event_notifier):
        assert event_notifier.publish(Event(event_type="nobody.listens")) == 0
