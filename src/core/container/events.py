"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscribes the
logging handler to every purge and logout event at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns:
        InMemoryEventBus with LoggingEventHandler subscriptions.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(CachePurgeSucceeded(...))
    """
    from src.domain.events import (
        CachePurgeAttempted,
        CachePurgePartiallyFailed,
        CachePurgeSucceeded,
        SecureLogoutFailed,
        SecureLogoutSucceeded,
    )
    from src.infrastructure.events import InMemoryEventBus
    from src.infrastructure.events.handlers import LoggingEventHandler

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)

    subscriptions = [
        (CachePurgeAttempted, logging_handler.handle_cache_purge_attempted),
        (CachePurgeSucceeded, logging_handler.handle_cache_purge_succeeded),
        (
            CachePurgePartiallyFailed,
            logging_handler.handle_cache_purge_partially_failed,
        ),
        (SecureLogoutSucceeded, logging_handler.handle_secure_logout_succeeded),
        (SecureLogoutFailed, logging_handler.handle_secure_logout_failed),
    ]
    for event_type, handler in subscriptions:
        event_bus.subscribe(event_type, handler)  # type: ignore[arg-type]

    return event_bus
