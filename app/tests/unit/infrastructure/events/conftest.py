"""Fixtures for infrastructure event system tests."""

import pytest
from datetime import datetime
from uuid import uuid4
from unittest.mock import MagicMock

from infrastructure.events.models import Event
from infrastructure.events.notifier import EventNotifier


@pytest.fixture
def event_factory():
    """Factory for creating test events."""

    def _factory(
        event_type: str = "test.event",
        timestamp: datetime = None,
        correlation_id=None,
        metadata: dict = None,
    ):
        return Event(
            event_type=event_type,
            timestamp=timestamp or datetime.now(),
            correlation_id=correlation_id or uuid4(),
            metadata=metadata or {},
        )

    return _factory


@pytest.fixture
def event_notifier():
    """Fresh notifier, cleared after the test."""
    notifier = EventNotifier()
    yield notifier
    notifier.clear()


@pytest.fixture
def mock_event_handler():
    """Mock event handler function."""
    return MagicMock()
