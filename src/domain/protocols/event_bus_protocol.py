"""Event bus protocol (port) for domain events.

The secure logout publishes purge and logout events so that observability
collaborators (structured logging today, telemetry later) can audit purge
reliability without the guard knowing about them.

Implementations:
    - InMemoryEventBus: src/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(CachePurgeSucceeded, handler.handle_cache_purge_succeeded)
    >>> await event_bus.publish(CachePurgeSucceeded(adapter_count=3))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Type alias for async event handler functions.

Event handlers must:
    - Accept single DomainEvent parameter (or specific event subclass)
    - Return None (side-effects only)
    - Be async (async def)
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must never reach the publisher.
        2. **Async support**: All handlers are async.
        3. **Type routing**: Handlers only receive events of the exact type
           they subscribed to.
        4. **No ordering guarantees** between handlers of the same event.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., CachePurgeSucceeded).
            handler: Async function called with the published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.

        Notes:
            - No handlers = no-op (not an error)
            - NEVER raises exceptions (fail-open guarantee)
        """
        ...
