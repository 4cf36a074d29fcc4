"""Secure transition state machine.

Each secure transition walks:

    IDLE -> PURGING -> (PURGE_COMPLETE | PURGE_FAILED_PARTIAL)
         -> TRANSITION_EXECUTING -> TRANSITION_COMPLETE

There is no terminal failure state for the purge phase: both purge outcomes
continue to TRANSITION_EXECUTING.
"""

from enum import Enum


class TransitionState(str, Enum):
    """Phases of one secure transition."""

    IDLE = "idle"
    PURGING = "purging"
    PURGE_COMPLETE = "purge_complete"
    PURGE_FAILED_PARTIAL = "purge_failed_partial"
    TRANSITION_EXECUTING = "transition_executing"
    TRANSITION_COMPLETE = "transition_complete"

    @property
    def next_states(self) -> frozenset["TransitionState"]:
        """States reachable from this one."""
        return _TRANSITIONS[self]

    def can_transition_to(self, target: "TransitionState") -> bool:
        """Check whether moving to target is a legal step."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[TransitionState, frozenset[TransitionState]] = {
    TransitionState.IDLE: frozenset({TransitionState.PURGING}),
    TransitionState.PURGING: frozenset(
        {TransitionState.PURGE_COMPLETE, TransitionState.PURGE_FAILED_PARTIAL}
    ),
    TransitionState.PURGE_COMPLETE: frozenset({TransitionState.TRANSITION_EXECUTING}),
    TransitionState.PURGE_FAILED_PARTIAL: frozenset(
        {TransitionState.TRANSITION_EXECUTING}
    ),
    TransitionState.TRANSITION_EXECUTING: frozenset(
        {TransitionState.TRANSITION_COMPLETE}
    ),
    TransitionState.TRANSITION_COMPLETE: frozenset(),
}
