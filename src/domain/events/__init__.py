"""Domain events module.

Usage:
    >>> from src.domain.events import CachePurgeSucceeded
    >>> await event_bus.publish(
    ...     CachePurgeSucceeded(transition_id=transition_id, adapter_count=3)
    ... )
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.logout_events import SecureLogoutFailed, SecureLogoutSucceeded
from src.domain.events.purge_events import (
    CachePurgeAttempted,
    CachePurgePartiallyFailed,
    CachePurgeSucceeded,
)

__all__ = [
    "DomainEvent",
    "CachePurgeAttempted",
    "CachePurgeSucceeded",
    "CachePurgePartiallyFailed",
    "SecureLogoutSucceeded",
    "SecureLogoutFailed",
]
