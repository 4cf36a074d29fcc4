"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Exact type routing

Architecture:
- Unit tests with mocked logger
- Tests fail-open behavior (critical requirement)
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.domain.events import (
    CachePurgeAttempted,
    CachePurgeSucceeded,
    DomainEvent,
)
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    async def test_subscribe_and_publish_single_handler(self):
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = CachePurgeSucceeded(transition_id=uuid4(), adapter_count=3)

        # Act
        event_bus.subscribe(CachePurgeSucceeded, handler)
        await event_bus.publish(event)

        # Assert
        assert received == [event]

    async def test_multiple_handlers_all_execute(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls: list[str] = []

        async def handler_1(event: DomainEvent) -> None:
            calls.append("handler_1")

        async def handler_2(event: DomainEvent) -> None:
            calls.append("handler_2")

        event_bus.subscribe(CachePurgeAttempted, handler_1)
        event_bus.subscribe(CachePurgeAttempted, handler_2)
        await event_bus.publish(CachePurgeAttempted(transition_id=uuid4()))

        assert sorted(calls) == ["handler_1", "handler_2"]
        assert event_bus.handler_count(CachePurgeAttempted) == 2

    async def test_publish_with_no_handlers_is_noop(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(CachePurgeAttempted(transition_id=uuid4()))

        mock_logger.debug.assert_not_called()

    async def test_handlers_only_receive_subscribed_type(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event_bus.subscribe(CachePurgeSucceeded, handler)
        await event_bus.publish(CachePurgeAttempted(transition_id=uuid4()))

        assert received == []


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior (critical requirement)."""

    async def test_handler_failure_does_not_break_other_handlers(self):
        # Arrange
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        successful: list[str] = []

        async def failing_handler(event: DomainEvent) -> None:
            raise ValueError("Handler intentionally failed")

        async def successful_handler(event: DomainEvent) -> None:
            successful.append("ok")

        event_bus.subscribe(CachePurgeAttempted, failing_handler)
        event_bus.subscribe(CachePurgeAttempted, successful_handler)

        # Act - should not raise
        await event_bus.publish(CachePurgeAttempted(transition_id=uuid4()))

        # Assert
        assert successful == ["ok"]
        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "event_handler_failed"
        assert call_args[1]["handler_name"] == "failing_handler"
        assert call_args[1]["error_type"] == "ValueError"
        assert call_args[1]["error_message"] == "Handler intentionally failed"
