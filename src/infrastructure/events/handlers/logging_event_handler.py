"""Logging event handler for domain events.

Structured logging for purge and secure logout events, giving an audit
trail of how reliably local data is destroyed on sign-out.

Log Levels:
    - INFO: Attempted and succeeded events (normal operations)
    - WARNING: Partially failed and failed events

Structured Fields:
    - event_id: UUID for event correlation and deduplication
    - occurred_at: ISO 8601 timestamp (UTC)
    - transition_id: Correlates the purge events of one secure transition
    - user_id: UUID (logout events only)
    - failed_adapters / error_codes: Stores left uncleared (purge failures)

Usage:
    >>> event_bus = get_event_bus()
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(CachePurgeAttempted, logging_handler.handle_cache_purge_attempted)
"""

from src.domain.events import (
    CachePurgeAttempted,
    CachePurgePartiallyFailed,
    CachePurgeSucceeded,
    SecureLogoutFailed,
    SecureLogoutSucceeded,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of purge and logout events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    # =========================================================================
    # Cache Purge Event Handlers
    # =========================================================================

    async def handle_cache_purge_attempted(self, event: CachePurgeAttempted) -> None:
        self._logger.info(
            "cache_purge_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            transition_id=str(event.transition_id),
        )

    async def handle_cache_purge_succeeded(self, event: CachePurgeSucceeded) -> None:
        self._logger.info(
            "cache_purge_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            transition_id=str(event.transition_id),
            adapter_count=event.adapter_count,
        )

    async def handle_cache_purge_partially_failed(
        self,
        event: CachePurgePartiallyFailed,
    ) -> None:
        """Log a purge that left stores uncleared (WARNING level).

        Args:
            event: CachePurgePartiallyFailed event with the failed stores.
        """
        self._logger.warning(
            "cache_purge_partially_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            transition_id=str(event.transition_id),
            adapter_count=event.adapter_count,
            failed_adapters=list(event.failed_adapters),
            error_codes=list(event.error_codes),
        )

    # =========================================================================
    # Secure Logout Event Handlers
    # =========================================================================

    async def handle_secure_logout_succeeded(
        self,
        event: SecureLogoutSucceeded,
    ) -> None:
        self._logger.info(
            "secure_logout_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            purge_succeeded=event.purge_succeeded,
        )

    async def handle_secure_logout_failed(self, event: SecureLogoutFailed) -> None:
        """Log a logout the auth provider did not complete (WARNING level).

        Args:
            event: SecureLogoutFailed event with the error code.
        """
        self._logger.warning(
            "secure_logout_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            reason=event.reason,
            purge_succeeded=event.purge_succeeded,
        )
