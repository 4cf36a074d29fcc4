"""Container module - Centralized dependency injection.

Re-exports every factory function so callers import from one place:

    from src.core.container import get_secure_logout_handler, get_logger

The container is organized into modules by concern:
- infrastructure: Logging, store backends, auth provider client
- stores: Store adapters and the invalidation registry
- events: Event bus and subscriptions
- handlers: Purge coordinator, transition guard, command handlers
"""

from src.core.container.events import get_event_bus
from src.core.container.handlers import (
    get_purge_coordinator,
    get_secure_logout_handler,
    get_transition_guard,
)
from src.core.container.infrastructure import (
    get_local_storage,
    get_logger,
    get_offline_database,
    get_response_cache,
    get_session_terminator,
)
from src.core.container.stores import get_invalidation_registry

__all__ = [
    # Infrastructure
    "get_logger",
    "get_offline_database",
    "get_local_storage",
    "get_response_cache",
    "get_session_terminator",
    # Stores
    "get_invalidation_registry",
    # Events
    "get_event_bus",
    # Handlers
    "get_purge_coordinator",
    "get_transition_guard",
    "get_secure_logout_handler",
]
