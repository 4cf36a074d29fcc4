"""Secure Logout handler.

Flow:
1. Purge every registered local store (transition guard)
2. Terminate the session at the auth provider (always, even after a
   partial purge)
3. Emit SecureLogoutSucceeded / SecureLogoutFailed
4. Return the auth provider's outcome

Purge failures are invisible to the user: the returned Result only reflects
whether the auth provider ended the session.

Architecture:
- Application layer ONLY imports from domain layer and application services
- NO infrastructure imports (terminator is injected via protocol)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.application.commands.logout_commands import SecureLogout
from src.application.services.transition_guard import TransitionGuard
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import SecureLogoutFailed, SecureLogoutSucceeded
from src.domain.protocols import LoggerProtocol, SessionTerminatorProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol


@dataclass
class LogoutResponse:
    """Response data for successful logout."""

    message: str = "Successfully logged out."


class SecureLogoutHandler:
    """Handler for the secure logout command."""

    def __init__(
        self,
        guard: TransitionGuard,
        session_terminator: SessionTerminatorProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize secure logout handler with dependencies.

        Args:
            guard: Transition guard that purges local stores first.
            session_terminator: Auth provider boundary.
            event_bus: Event bus for publishing logout events.
            logger: Structured logger.
        """
        self._guard = guard
        self._session_terminator = session_terminator
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: SecureLogout) -> Result[LogoutResponse, DomainError]:
        """Handle secure logout command.

        Args:
            cmd: SecureLogout command with user_id and access_token.

        Returns:
            Success(LogoutResponse) if the auth provider ended the session.
            Failure(DomainError) if it did not. Purge failures never produce
            a Failure here.
        """

        async def terminate() -> Result[None, DomainError]:
            return await self._session_terminator.terminate_session(cmd.access_token)

        outcome = await self._guard.secure_transition(terminate)
        purge_succeeded = outcome.purge.all_succeeded

        match outcome.transition:
            case Success():
                await self._event_bus.publish(
                    SecureLogoutSucceeded(
                        user_id=cmd.user_id,
                        purge_succeeded=purge_succeeded,
                    )
                )
                return Success(value=LogoutResponse())
            case Failure(error=err):
                await self._event_bus.publish(
                    SecureLogoutFailed(
                        user_id=cmd.user_id,
                        reason=err.code.value,
                        purge_succeeded=purge_succeeded,
                    )
                )
                self._logger.warning(
                    "secure_logout_session_not_terminated",
                    user_id=str(cmd.user_id),
                    error_code=err.code.value,
                )
                return Failure(error=err)
            case _:
                # Unreachable but needed for type checker
                return outcome.transition
