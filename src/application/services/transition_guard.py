"""Transition guard for security-sensitive state changes.

Runs a full purge pass strictly before a sensitive action (sign-out) and
then runs the action regardless of the purge outcome.

Policy:
    A failed purge is NOT a reason to abort the transition. Keeping a live
    session because a cache could not be cleared is a worse security outcome
    than ending the session with a stale local cache. Purge results are
    logged and published for auditing only, never surfaced as blocking
    errors.

State machine (per secure_transition call):
    IDLE -> PURGING -> (PURGE_COMPLETE | PURGE_FAILED_PARTIAL)
         -> TRANSITION_EXECUTING -> TRANSITION_COMPLETE

Usage:
    >>> guard = TransitionGuard(coordinator=coordinator, event_bus=bus, logger=logger)
    >>> result = await guard.secure_transition(
    ...     lambda: terminator.terminate_session(access_token)
    ... )
    >>> result.transition  # the auth provider's own Result
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.enums import TransitionState
from src.domain.events import (
    CachePurgeAttempted,
    CachePurgePartiallyFailed,
    CachePurgeSucceeded,
)
from src.domain.protocols import LoggerProtocol, PurgeCoordinatorProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.value_objects import AggregatePurgeResult

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class SecureTransitionResult(Generic[T]):
    """Outcome of one secure transition.

    Attributes:
        transition_id: Correlates the events and logs of this transition.
        purge: Aggregate result of the purge pass (observability only).
        transition: Whatever the sensitive action returned.
        states: States visited, in order.
    """

    transition_id: UUID
    purge: AggregatePurgeResult
    transition: T
    states: tuple[TransitionState, ...]

    @property
    def final_state(self) -> TransitionState:
        """Last state reached by this transition."""
        return self.states[-1]


class _TransitionTracker:
    """Records the states of a single transition, rejecting illegal steps."""

    def __init__(self) -> None:
        self.states: list[TransitionState] = [TransitionState.IDLE]

    @property
    def current(self) -> TransitionState:
        return self.states[-1]

    def advance(self, target: TransitionState) -> None:
        if not self.current.can_transition_to(target):
            raise RuntimeError(
                f"Illegal transition {self.current.value} -> {target.value}"
            )
        self.states.append(target)


class TransitionGuard:
    """Purges local stores, then always performs the sensitive action.

    Attributes:
        _coordinator: Runs the purge pass.
        _event_bus: Receives purge events for auditing (fail-open).
        _logger: Structured logger.
    """

    def __init__(
        self,
        coordinator: PurgeCoordinatorProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize guard with dependencies.

        Args:
            coordinator: Purge coordinator run before every transition.
            event_bus: Event bus for purge events.
            logger: Logger for transition diagnostics.
        """
        self._coordinator = coordinator
        self._event_bus = event_bus
        self._logger = logger

    async def secure_transition(
        self,
        sensitive_action: Callable[[], Awaitable[T]],
    ) -> SecureTransitionResult[T]:
        """Purge every store, then run sensitive_action exactly once.

        Args:
            sensitive_action: Zero-argument coroutine function performing the
                transition (e.g., terminate the auth session).

        Returns:
            SecureTransitionResult with the purge result and the action's
            return value.

        Raises:
            Exception: Only what sensitive_action itself raises. Purge
                failures never raise.
        """
        transition_id = uuid7()
        tracker = _TransitionTracker()
        logger = self._logger.bind(transition_id=str(transition_id))

        tracker.advance(TransitionState.PURGING)
        purge = await self._purge(transition_id, logger)

        if purge.all_succeeded:
            tracker.advance(TransitionState.PURGE_COMPLETE)
        else:
            tracker.advance(TransitionState.PURGE_FAILED_PARTIAL)

        # Proceeds on both purge outcomes
        tracker.advance(TransitionState.TRANSITION_EXECUTING)
        transition = await sensitive_action()
        tracker.advance(TransitionState.TRANSITION_COMPLETE)

        logger.info(
            "secure_transition_completed",
            purge_succeeded=purge.all_succeeded,
            states=[state.value for state in tracker.states],
        )

        return SecureTransitionResult(
            transition_id=transition_id,
            purge=purge,
            transition=transition,
            states=tuple(tracker.states),
        )

    async def _purge(
        self,
        transition_id: UUID,
        logger: LoggerProtocol,
    ) -> AggregatePurgeResult:
        """Run the purge pass and publish its events."""
        await self._event_bus.publish(CachePurgeAttempted(transition_id=transition_id))

        purge = await self._coordinator.purge_all()

        if purge.all_succeeded:
            await self._event_bus.publish(
                CachePurgeSucceeded(
                    transition_id=transition_id,
                    adapter_count=len(purge.outcomes),
                )
            )
        else:
            error_codes = tuple(
                outcome.error.code.value
                for outcome in purge.outcomes
                if outcome.error is not None
            )
            await self._event_bus.publish(
                CachePurgePartiallyFailed(
                    transition_id=transition_id,
                    adapter_count=len(purge.outcomes),
                    failed_adapters=purge.failed_adapters,
                    error_codes=error_codes,
                )
            )
            logger.warning(
                "secure_transition_purge_incomplete",
                failed_adapters=list(purge.failed_adapters),
            )

        return purge
