"""Application service and command handler factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_logger, get_session_terminator
from src.core.container.stores import get_invalidation_registry

if TYPE_CHECKING:
    from src.application.commands.handlers.secure_logout_handler import (
        SecureLogoutHandler,
    )
    from src.application.services.purge_coordinator import PurgeCoordinator
    from src.application.services.transition_guard import TransitionGuard


@lru_cache()
def get_purge_coordinator() -> "PurgeCoordinator":
    """Get purge coordinator singleton using the configured strategy."""
    from src.application.services.purge_coordinator import PurgeCoordinator

    return PurgeCoordinator(
        registry=get_invalidation_registry(),
        logger=get_logger(),
        strategy=get_settings().purge_strategy,
    )


@lru_cache()
def get_transition_guard() -> "TransitionGuard":
    from src.application.services.transition_guard import TransitionGuard

    return TransitionGuard(
        coordinator=get_purge_coordinator(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_secure_logout_handler() -> "SecureLogoutHandler":
    """Get SecureLogoutHandler (request-scoped, built from singletons).

    Usage:
        handler = get_secure_logout_handler()
        result = await handler.handle(SecureLogout(user_id=uid, access_token=t))
    """
    from src.application.commands.handlers.secure_logout_handler import (
        SecureLogoutHandler,
    )

    return SecureLogoutHandler(
        guard=get_transition_guard(),
        session_terminator=get_session_terminator(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )
